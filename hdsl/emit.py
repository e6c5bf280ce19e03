# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Render a `Generation` as Python source for two modules: element accessors (with the metadata maps) and attribute accessors.

Accessors that share a name are emitted as `typing.overload` stubs followed by a single implementation.
If any overload is variadic, the implementation takes `*args` and forwards them to the constructor;
otherwise the overloads are merged into one signature whose defaults are the literals of the shorter overloads.
'''

from string import Template
from types import ModuleType
from typing import Any, Iterable, Optional

from .accessors import Accessor, Arg, Call, Lit, Param, ParamKind, Prefixed, Ref
from .config import GenConfig
from .exceptions import EmitError, IdentifierError
from .generate import Generation
from .metadata import MetadataMaps
from .semantics import AttrScope


def render_template(template:str, **substitutions:Any) -> str:
  'Render a template using $ syntax.'
  t = Template(template)
  return t.substitute(substitutions)


# Fragments.

_param_formats = {
  ParamKind.VARIADIC_FRAGMENTS: '*{}:Frag',
  ParamKind.ITERABLE_FRAGMENTS: '{}:Iterable[Frag], /',
  ParamKind.VARIADIC_TEXT: '*{}:str',
  ParamKind.VARIADIC_ATTRS: '*{}:Attr',
  ParamKind.STRING: '{}:str',
  ParamKind.BOOL: '{}:bool',
}


def fmt_param(param:Param, default:Optional[Lit]=None) -> str:
  s = _param_formats[param.kind].format(param.name)
  if default is None: return s
  if param.kind.is_variadic or param.kind == ParamKind.ITERABLE_FRAGMENTS:
    raise EmitError(f'parameter {param.name!r} of kind {param.kind.value} cannot take a default.')
  return f'{s}={fmt_lit(default.val)}'


def fmt_lit(val:Any) -> str:
  if isinstance(val, AttrScope): return f'AttrScope.{val.name}'
  if isinstance(val, (str, bool)): return repr(val)
  raise TypeError(f'unsupported literal: {val!r}')


def fmt_arg(arg:Arg) -> str:
  match arg:
    case Lit(val): return fmt_lit(val)
    case Ref(param): return param
    case Prefixed(prefix, param): return f'{prefix!r} + {param}'
  raise TypeError(f'unsupported argument: {arg!r}')


def fmt_call(call:Call) -> str:
  return f'{call.ctor.value}({", ".join(fmt_arg(a) for a in call.args)})'


def fmt_import(module:str, names:Iterable[str]) -> str:
  'Format a `from` import, wrapping long lines.'
  ordered = sorted(set(names), key=lambda n: (n.lower(), n))
  line = f'from {module} import {", ".join(ordered)}'
  if len(line) <= 120: return line
  lines = [f'from {module} import (']
  for n in ordered:
    if len(lines[-1]) + len(n) + 2 > 118:
      lines[-1] = lines[-1].rstrip()
      lines.append('  ')
    lines[-1] += n + ', '
  return '\n'.join(lines).rstrip(', ') + ')'


def_template = '''\
def ${name}(${params}) -> ${result}:
  ${doc}return ${body}'''


def fmt_def(name:str, params:Iterable[str], result:str, doc:str, body:str) -> str:
  return render_template(def_template, name=name, params=', '.join(params), result=result,
    doc=f'{doc!r}\n  ' if doc else '', body=body)


# Accessor groups.

def emit_group(name:str, accessors:list[Accessor]) -> str:
  '''
  Emit one function for a group of accessors sharing `name`.
  Raises EmitError if the overloads cannot be implemented by a single function.
  '''
  result = accessors[0].result
  for a in accessors:
    if a.result != result: raise EmitError(f'{name}: overloads have different results: {result} vs {a.result}')
  doc = next((a.doc for a in accessors if a.doc), '')
  if len(accessors) == 1:
    a = accessors[0]
    return fmt_def(name, [fmt_param(p) for p in a.params], result.value, doc, fmt_call(a.call))
  stubs = [f'@overload\ndef {name}({", ".join(fmt_param(p) for p in a.params)}) -> {result.value}: ...'
    for a in accessors]
  if any(a.is_variadic for a in accessors):
    impl = _variadic_impl(name, accessors, result.value, doc)
  else:
    impl = _defaults_impl(name, accessors, result.value, doc)
  return '\n'.join([*stubs, impl])


def _variadic_impl(name:str, accessors:list[Accessor], result:str, doc:str) -> str:
  'All overloads must call the same constructor with the same literal prefix, followed by their own parameters.'
  ctor = accessors[0].call.ctor
  prefix:Optional[tuple[Arg,...]] = None
  for a in accessors:
    n = len(a.call.args) - a.arity
    head, tail = a.call.args[:n], a.call.args[n:]
    if (a.call.ctor != ctor or not all(isinstance(h, Lit) for h in head)
     or tail != tuple(Ref(p.name) for p in a.params)):
      raise EmitError(f'{name}: overload cannot be dispatched with *args: {a.describe()}')
    if prefix is None: prefix = head
    elif head != prefix: raise EmitError(f'{name}: overloads pass different literal arguments: {a.describe()}')
  assert prefix is not None
  args = ', '.join([*(fmt_arg(h) for h in prefix), '*args'])
  return fmt_def(name, ['*args:Any'], result, doc, f'{ctor.value}({args})')


def _defaults_impl(name:str, accessors:list[Accessor], result:str, doc:str) -> str:
  '''
  Merge fixed-arity overloads into the longest one.
  Each shorter overload must take a prefix of the longest one's parameters,
  and pass literals where the longest one passes the parameters it lacks; those literals become the defaults.
  '''
  full = max(accessors, key=lambda a: a.arity)
  if sum(1 for a in accessors if a.arity == full.arity) > 1:
    raise EmitError(f'{name}: fixed-arity overloads with the same arity cannot be merged.')
  defaults:dict[str,Lit] = {}
  for a in accessors:
    if a is full: continue
    own = {p.name for p in a.params}
    if (a.params != full.params[:a.arity] or a.call.ctor != full.call.ctor
     or len(a.call.args) != len(full.call.args)):
      raise EmitError(f'{name}: overload is not a prefix of {full.describe()}: {a.describe()}')
    for full_arg, arg in zip(full.call.args, a.call.args):
      if full_arg == arg: continue
      if not (isinstance(full_arg, Ref) and full_arg.param not in own and isinstance(arg, Lit)):
        raise EmitError(f'{name}: overload differs from {full.describe()} other than by a default: {a.describe()}')
      existing = defaults.setdefault(full_arg.param, arg)
      if existing != arg:
        raise EmitError(f'{name}: conflicting defaults for {full_arg.param!r}: {existing.val!r}, {arg.val!r}')
  params = []
  has_default = False
  for p in full.params:
    default = defaults.get(p.name)
    if default is None and has_default:
      raise EmitError(f'{name}: parameter {p.name!r} without a default follows one with a default.')
    has_default = default is not None
    params.append(fmt_param(p, default))
  return fmt_def(name, params, result, doc, fmt_call(full.call))


def emit_groups(groups:list[tuple[str,list[Accessor]]]) -> str:
  return '\n\n'.join(emit_group(name, accs) for name, accs in groups)


def check_shadowing(module:str, names:Iterable[str], taken:Iterable[str]) -> None:
  clashes = sorted(set(names).intersection(taken))
  if clashes: raise IdentifierError(f'{module}: accessor names shadow module-level names: {clashes}')


# Modules.

module_template = '''\
${license}# Generated by hdsl; do not edit.

${doc}

${imports}


${body}
'''


def _render_module(config:GenConfig, doc:str, imports:list[str], body:str) -> str:
  return render_template(module_template,
    license=f'# {config.license}\n' if config.license else '',
    doc=repr(doc),
    imports='\n'.join(imports),
    body=body)


def _typing_names(groups:list[tuple[str,list[Accessor]]]) -> set[str]:
  names:set[str] = set()
  for _, accs in groups:
    if len(accs) > 1:
      names.add('overload')
      if any(a.is_variadic for a in accs): names.add('Any')
    if any(p.kind == ParamKind.ITERABLE_FRAGMENTS for a in accs for p in a.params): names.add('Iterable')
  return names


def _runtime_names(accessors:Iterable[Accessor]) -> set[str]:
  names:set[str] = set()
  for a in accessors:
    names.add(a.result.value)
    names.add(a.call.ctor.value)
    for p in a.params:
      if p.kind in (ParamKind.VARIADIC_FRAGMENTS, ParamKind.ITERABLE_FRAGMENTS): names.add('Frag')
      elif p.kind == ParamKind.VARIADIC_ATTRS: names.add('Attr')
  return names


def _uses_scope(accessors:Iterable[Accessor]) -> bool:
  return any(isinstance(arg, Lit) and isinstance(arg.val, AttrScope) for a in accessors for arg in a.call.args)


metadata_template = '''\
content_categories:Mapping[str,frozenset[ContentCategory]] = MappingProxyType({
${content_categories}
})

display_types:Mapping[str,DisplayType] = MappingProxyType({
${display_types}
})

element_types:Mapping[str,ElementType] = MappingProxyType({
${element_types}
})

valid_contexts:Mapping[str,frozenset[Context]] = MappingProxyType({
${valid_contexts}
})


def content_categories_of(name:str) -> frozenset[ContentCategory]:
  return content_categories.get(name, frozenset())

def display_type_of(name:str) -> Optional[DisplayType]:
  return display_types.get(name)

def element_type_of(name:str) -> Optional[ElementType]:
  return element_types.get(name)

def valid_contexts_of(name:str) -> frozenset[Context]:
  return valid_contexts.get(name, frozenset())'''

metadata_names = frozenset({
  'content_categories',
  'content_categories_of',
  'display_type_of',
  'display_types',
  'element_type_of',
  'element_types',
  'valid_contexts',
  'valid_contexts_of',
})


def _fmt_member_set(members:frozenset) -> str:
  if not members: return 'frozenset()'
  items = ', '.join(f'{type(m).__name__}.{m.name}' for m in sorted(members, key=lambda m: m.name))
  return f'frozenset({{{items}}})'


def emit_metadata(maps:MetadataMaps) -> str:
  def entries(mapping:Any, fmt:Any) -> str:
    return '\n'.join(f'  {name!r}: {fmt(val)},' for name, val in sorted(mapping.items()))
  def fmt_member(m:Any) -> str: return f'{type(m).__name__}.{m.name}'
  return render_template(metadata_template,
    content_categories=entries(maps.content_categories, _fmt_member_set),
    display_types=entries(maps.display_types, fmt_member),
    element_types=entries(maps.element_types, fmt_member),
    valid_contexts=entries(maps.valid_contexts, _fmt_member_set))


def emit_elements_module(generation:Generation, config:GenConfig=GenConfig()) -> str:
  accessors = generation.element_accessors
  typing_names = _typing_names(generation.element_groups()) | {'Mapping', 'Optional'}
  runtime_names = _runtime_names(accessors)
  semantics_names = {'ContentCategory', 'Context', 'DisplayType', 'ElementType'}
  if _uses_scope(accessors): semantics_names.add('AttrScope')
  imports = [
    fmt_import('types', ['MappingProxyType']),
    fmt_import('typing', typing_names),
    '',
    fmt_import(config.runtime_module, runtime_names),
    fmt_import(config.semantics_module, semantics_names),
  ]
  taken = {'MappingProxyType'} | typing_names | runtime_names | semantics_names | metadata_names
  check_shadowing(config.tags_module, (a.name for a in accessors), taken)
  body = emit_groups(generation.element_groups()) + '\n\n\n' + emit_metadata(generation.metadata)
  return _render_module(config, 'HTML element accessors and classification lookups.', imports, body)


def emit_attrs_module(generation:Generation, config:GenConfig=GenConfig()) -> str:
  accessors = generation.attr_accessors
  typing_names = _typing_names(generation.attr_groups())
  runtime_names = _runtime_names(accessors)
  imports = []
  if typing_names: imports.extend([fmt_import('typing', typing_names), ''])
  imports.append(fmt_import(config.runtime_module, runtime_names))
  semantics_names = {'AttrScope'} if _uses_scope(accessors) else set()
  if semantics_names: imports.append(fmt_import(config.semantics_module, semantics_names))
  check_shadowing(config.attrs_module, (a.name for a in accessors), typing_names | runtime_names | semantics_names)
  body = emit_groups(generation.attr_groups())
  return _render_module(config, 'HTML attribute accessors.', imports, body)


def emit_modules(generation:Generation, config:GenConfig=GenConfig()) -> list[tuple[str,str]]:
  'Return (path, source) pairs for the generated modules.'
  return [
    (config.tags_path, emit_elements_module(generation, config)),
    (config.attrs_path, emit_attrs_module(generation, config)),
  ]


def load_module(name:str, source:str) -> ModuleType:
  'Execute `source` as a fresh module named `name`. The module is not added to `sys.modules`.'
  module = ModuleType(name)
  code = compile(source, f'<{name}>', 'exec')
  exec(code, module.__dict__)
  return module
