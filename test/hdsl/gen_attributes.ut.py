# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from hdsl.accessors import Accessor, Call, Ctor, Lit, Param, ParamKind, Prefixed, Ref
from hdsl.attributes import ATTRIBUTES
from hdsl.conflicts import ConflictResolver
from hdsl.gen_attributes import attr_accessors, CONVENTIONAL_ENUM_DEFAULTS, default_enum_value, special_accessors
from hdsl.semantics import AttrScope, AttrType
from utest import utest, utest_exc, utest_seq, utest_val


FORM = AttrScope.FORM_ELEMENTS
LINK = AttrScope.LINK_ELEMENTS
UNIVERSAL = AttrScope.UNIVERSAL

resolver = ConflictResolver(ATTRIBUTES)
by_key = {d.key: d for d in ATTRIBUTES}

def accs_for(name:str, scope:AttrScope) -> list[Accessor]: return attr_accessors(by_key[(name, scope)], resolver)

def shapes(accs:list[Accessor]) -> list[tuple[str,tuple[ParamKind,...]]]: return [a.signature for a in accs]


# Default value heuristic.
utest('ltr', default_enum_value, 'dir', ['ltr', 'rtl', 'auto'])
utest('ltr', default_enum_value, 'dir', ['auto', 'rtl', 'ltr']) # Independent of value order.
utest('false', default_enum_value, 'aria-expanded', ['true', 'false', 'undefined'])
utest('false', default_enum_value, 'contenteditable', ['true', 'false', 'plaintext-only'])
utest('no', default_enum_value, 'translate', ['yes', 'no'])
utest('off', default_enum_value, 'autocomplete', ['on', 'off', 'name'])
utest('no', default_enum_value, 'x', ['off', 'no']) # `no` precedes `off`.
utest('_self', default_enum_value, 'target', ['_blank', '_self', '_parent', '_top'])
utest('anonymous', default_enum_value, 'crossorigin', ['anonymous', 'use-credentials'])
utest('metadata', default_enum_value, 'preload', ['none', 'metadata', 'auto'])
utest('get', default_enum_value, 'method', ['get', 'post'])
utest('get', default_enum_value, 'formmethod', ['post', 'get']) # Lexicographically first.
utest('circle', default_enum_value, 'shape', ['rect', 'circle', 'poly', 'default'])
utest('a', default_enum_value, 'target', ['b', 'a']) # Conventional default absent from the values.
utest_exc(ValueError, default_enum_value, 'x', [])
utest_val('ltr', CONVENTIONAL_ENUM_DEFAULTS['dir'])


# Boolean: exactly two accessors, both for the same attribute literal.
disabled = accs_for('disabled', FORM)
utest_val([('disabled', ()), ('disabled', (ParamKind.BOOL,))], shapes(disabled))
utest_val(Call(Ctor.BOOLEAN_ATTRIBUTE, (Lit('disabled'), Lit(True))), disabled[0].call)
utest_val(Call(Ctor.BOOLEAN_ATTRIBUTE, (Lit('disabled'), Ref('present'))), disabled[1].call)

# String-like types degrade to one string accessor.
for name, scope in [('id', UNIVERSAL), ('tabindex', UNIVERSAL), ('href', LINK), ('pattern', FORM), ('class', UNIVERSAL)]:
  accs = accs_for(name, scope)
  utest_val(1, len(accs), f'{name} accessor count')
  utest_val((ParamKind.STRING,), accs[0].signature[1], f'{name} params')
  utest_val(Ctor.STRING_ATTRIBUTE, accs[0].call.ctor, f'{name} constructor')
utest_val('class_', accs_for('class', UNIVERSAL)[0].name)

# Enum, non-conflicting: one factory per value in sorted order, the general accessor, and the convenience accessor.
dir_accs = accs_for('dir', UNIVERSAL)
utest_val([('dirAuto', ()), ('dirLtr', ()), ('dirRtl', ()), ('dir', (ParamKind.STRING,)), ('dir', ())], shapes(dir_accs))
utest_val(Call(Ctor.ENUM_ATTRIBUTE, (Lit('dir'), Lit('rtl'))), dir_accs[2].call)
utest_val(Call(Ctor.ENUM_ATTRIBUTE, (Lit('dir'), Ref('value'))), dir_accs[3].call)
utest_val(Call(Ctor.ENUM_ATTRIBUTE, (Lit('dir'), Lit('ltr'))), dir_accs[4].call, 'dir convenience default')
utest_val(dir_accs, accs_for('dir', UNIVERSAL), 'regeneration is stable')

# Enum, conflicting: scoped general accessors, scoped constructors, no convenience accessor.
type_form = accs_for('type', FORM)
type_link = accs_for('type', LINK)
form_values = by_key[('type', FORM)].enum_values
utest_val(len(form_values) + 1, len(type_form), 'type form accessor count')
utest_val(['typeForm'], [a.name for a in type_form if a.params], 'type form general accessor')
utest_val(['typeLink'], [a.name for a in type_link if a.params], 'type link general accessor')
utest_val(frozenset(), {a.name for a in type_form} & {a.name for a in type_link}, 'type names do not collide')
utest_val({Ctor.SCOPED_ENUM_ATTRIBUTE}, {a.call.ctor for a in type_form + type_link}, 'type constructors')
utest_val({Lit(FORM)}, {a.call.args[-1] for a in type_form}, 'type form scope')
utest_val({Lit(LINK)}, {a.call.args[-1] for a in type_link}, 'type link scope')
utest_val(Call(Ctor.SCOPED_ENUM_ATTRIBUTE, (Lit('type'), Ref('value'), Lit(FORM))),
  next(a for a in type_form if a.name == 'typeForm').call)
utest_val(Call(Ctor.SCOPED_ENUM_ATTRIBUTE, (Lit('type'), Lit('text/css'), Lit(LINK))),
  next(a for a in type_link if a.name == 'typeTextCss').call)
utest_val(True, 'typeCheckbox' in {a.name for a in type_form}, 'typeCheckbox')

# Conflicting non-enum names get a scoped string accessor.
utest_val([Accessor('sizeForm', (Param('value', ParamKind.STRING),),
    Call(Ctor.SCOPED_STRING_ATTRIBUTE, (Lit('size'), Ref('value'), Lit(FORM))),
    origin="attribute 'size' (FORM_ELEMENTS)", doc='Size of form control')],
  accs_for('size', FORM))
utest_val('sizeSpecific', accs_for('size', AttrScope.SPECIFIC_ELEMENTS)[0].name)

# Template and event names are excluded from the per-name loop.
utest_seq([], attr_accessors, by_key[('data-*', UNIVERSAL)], resolver)
utest_seq([], attr_accessors, by_key[('onclick', UNIVERSAL)], resolver)
for d in ATTRIBUTES:
  if d.type == AttrType.SCRIPT: utest_val([], attr_accessors(d, resolver), f'{d.name} has no accessors')

# The three fixed accessors.
specials = special_accessors()
utest_val(['data', 'event', 'xmlns'], [a.name for a in specials])
utest_val(Call(Ctor.STRING_ATTRIBUTE, (Prefixed('data-', 'name'), Ref('value'))), specials[0].call)
utest_val(Call(Ctor.STRING_ATTRIBUTE, (Prefixed('on', 'event_name'), Ref('handler'))), specials[1].call)
utest_val(Call(Ctor.STRING_ATTRIBUTE, (Lit('xmlns'), Ref('value'))), specials[2].call)
