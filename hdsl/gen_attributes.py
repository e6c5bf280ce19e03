# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Attribute overload-set generator.

Boolean attributes get a zero-argument accessor (present) and a one-boolean accessor.
Enum attributes get a zero-argument factory per value, plus the general string accessor;
if the name is not conflicting they also get a zero-argument convenience accessor for the default value.
All other types degrade to a single string accessor.
Template names (`data-*`) and event handler names are served by the fixed special accessors instead.
'''

from typing import assert_never, Iterable

from .accessors import Accessor, Arg, Call, Ctor, Lit, Param, ParamKind, Prefixed, Ref
from .conflicts import ConflictResolver
from .semantics import AttrDescriptor, AttrType, event_prefix


tri_state_values = frozenset({'true', 'false', 'undefined'})

# Checked in order; the first one present wins.
safe_default_values = ('false', 'no', 'off')

CONVENTIONAL_ENUM_DEFAULTS = {
  'contenteditable': 'false',
  'crossorigin': 'anonymous',
  'dir': 'ltr',
  'method': 'get',
  'preload': 'metadata',
  'target': '_self',
}


def default_enum_value(name:str, values:Iterable[str]) -> str:
  '''
  Choose the value for the convenience accessor of an enum attribute:
  `false` for the tri-state set; else the first of `false`, `no`, `off` present;
  else the conventional default for `name`; else the lexicographically first value.
  '''
  vals = frozenset(values)
  if not vals: raise ValueError(f'enum attribute {name!r} has no values.')
  if vals == tri_state_values: return 'false'
  for v in safe_default_values:
    if v in vals: return v
  conventional = CONVENTIONAL_ENUM_DEFAULTS.get(name)
  if conventional in vals: return conventional # type: ignore[comparison-overlap]
  return min(vals)


def attr_accessors(descriptor:AttrDescriptor, resolver:ConflictResolver) -> list[Accessor]:
  'Generate the accessors for one descriptor. Open-ended descriptors yield nothing.'
  d = descriptor
  if d.is_open_ended: return []
  conflicting = resolver.is_conflicting(d)
  general_name = resolver.general_name(d)
  origin = f'attribute {d.name!r} ({d.scope.name})'
  name_lit = Lit(d.name)

  def call(ctor:Ctor, value:Arg) -> Call:
    if conflicting: return Call(ctor.scoped, (name_lit, value, Lit(d.scope)))
    return Call(ctor, (name_lit, value))

  def acc(name:str, params:tuple[Param,...], body:Call, doc:str=d.desc) -> Accessor:
    return Accessor(name, params, body, origin=origin, doc=doc)

  value_param = Param('value', ParamKind.STRING)

  match d.type:
    case AttrType.BOOLEAN:
      present_param = Param('present', ParamKind.BOOL)
      return [
        acc(general_name, (), call(Ctor.BOOLEAN_ATTRIBUTE, Lit(True))),
        acc(general_name, (present_param,), call(Ctor.BOOLEAN_ATTRIBUTE, Ref(present_param.name))),
      ]
    case AttrType.ENUM:
      accessors = [acc(resolver.enum_value_name(d, v), (), call(Ctor.ENUM_ATTRIBUTE, Lit(v)), doc=f'{d.desc}: {v!r}.')
        for v in d.sorted_enum_values]
      accessors.append(acc(general_name, (value_param,), call(Ctor.ENUM_ATTRIBUTE, Ref(value_param.name))))
      if not conflicting:
        default = default_enum_value(d.name, d.enum_values)
        accessors.append(acc(general_name, (), call(Ctor.ENUM_ATTRIBUTE, Lit(default))))
      return accessors
    case (AttrType.STRING | AttrType.NUMBER | AttrType.URL | AttrType.TOKEN_LIST | AttrType.COMMA_LIST
     | AttrType.COLOR | AttrType.DIMENSION | AttrType.LANGUAGE | AttrType.CHARSET | AttrType.REGEX | AttrType.SCRIPT):
      return [acc(general_name, (value_param,), call(Ctor.STRING_ATTRIBUTE, Ref(value_param.name)))]
    case _ as unreachable:
      assert_never(unreachable)


data_prefix = 'data-'

def special_accessors() -> list[Accessor]:
  'The fixed accessors for the open-ended parts of the attribute name space.'
  return [
    Accessor('data', (Param('name', ParamKind.STRING), Param('value', ParamKind.STRING)),
      Call(Ctor.STRING_ATTRIBUTE, (Prefixed(data_prefix, 'name'), Ref('value'))),
      origin="special accessor 'data'", doc='Custom data attribute `data-{name}`.'),
    Accessor('event', (Param('event_name', ParamKind.STRING), Param('handler', ParamKind.STRING)),
      Call(Ctor.STRING_ATTRIBUTE, (Prefixed(event_prefix, 'event_name'), Ref('handler'))),
      origin="special accessor 'event'", doc='Event handler attribute `on{event_name}`.'),
    Accessor('xmlns', (Param('value', ParamKind.STRING),),
      Call(Ctor.STRING_ATTRIBUTE, (Lit('xmlns'), Ref('value'))),
      origin="special accessor 'xmlns'", doc='XML namespace URI.'),
  ]
