# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from hdsl.accessors import Call, Ctor, Lit, Param, ParamKind, Ref
from hdsl.elements import ELEMENTS
from hdsl.gen_elements import element_accessors, element_shape
from hdsl.semantics import ContentCategory, Context, DisplayType, element, ElementType
from utest import utest, utest_val


elements_by_name = {d.name: d for d in ELEMENTS}

def shape_of(name:str) -> Ctor: return element_shape(elements_by_name[name])

def kinds(accessors) -> list[tuple[ParamKind,...]]: return [tuple(p.kind for p in a.params) for a in accessors]


# Container: four accessors named for the tag, all delegating to the block container constructor.
div = element('div', DisplayType.BLOCK, ElementType.CONTAINER, [ContentCategory.FLOW], [Context.FLOW_CTX], 'Generic container')
div_accs = element_accessors(div)
utest_val(4, len(div_accs), 'div accessor count')
utest_val({'div'}, {a.name for a in div_accs}, 'div names')
utest_val({Ctor.BLOCK_CONTAINER}, {a.call.ctor for a in div_accs}, 'div constructors')
utest_val({Lit('div')}, {a.call.args[0] for a in div_accs}, 'div tag literal')
utest_val([(ParamKind.VARIADIC_FRAGMENTS,), (ParamKind.ITERABLE_FRAGMENTS,), (ParamKind.VARIADIC_TEXT,), ()], kinds(div_accs))
utest_val(Call(Ctor.BLOCK_CONTAINER, (Lit('div'), Ref('children'))), div_accs[0].call, 'div variadic call')
utest_val(Call(Ctor.BLOCK_CONTAINER, (Lit('div'),)), div_accs[3].call, 'div empty call')
utest_val(len(div_accs), len({a.signature for a in div_accs}), 'div signatures are distinct')

# Void: two accessors.
br = element('br', DisplayType.INLINE, ElementType.VOID, [], [], 'Line break')
br_accs = element_accessors(br)
utest_val(['br', 'br'], [a.name for a in br_accs])
utest_val({Ctor.INLINE_VOID_ELEMENT}, {a.call.ctor for a in br_accs}, 'br constructors')
utest_val([(Param('attrs', ParamKind.VARIADIC_ATTRS),), ()], [a.params for a in br_accs])

# Decision table.
utest(Ctor.BLOCK_VOID_ELEMENT, shape_of, 'hr')
utest(Ctor.BLOCK_VOID_ELEMENT, shape_of, 'meta')
utest(Ctor.BLOCK_VOID_ELEMENT, shape_of, 'link') # Phrasing, but structural.
utest(Ctor.BLOCK_VOID_ELEMENT, shape_of, 'base')
utest(Ctor.INLINE_VOID_ELEMENT, shape_of, 'img')
utest(Ctor.INLINE_VOID_ELEMENT, shape_of, 'area')
utest(Ctor.INLINE_CONTAINER, shape_of, 'span')
utest(Ctor.INLINE_CONTAINER, shape_of, 'script') # RAW_TEXT and phrasing.
utest(Ctor.INLINE_CONTAINER, shape_of, 'textarea') # ESCAPABLE_RAW_TEXT and phrasing.
utest(Ctor.BLOCK_CONTAINER, shape_of, 'style') # RAW_TEXT, metadata only.
utest(Ctor.BLOCK_CONTAINER, shape_of, 'title')
utest(Ctor.BLOCK_CONTAINER, shape_of, 'p')
utest(Ctor.BLOCK_CONTAINER, shape_of, 'td')
utest(Ctor.BLOCK_VOID_ELEMENT, element_shape, br, frozenset({'br'}))
utest(Ctor.INLINE_CONTAINER, element_shape,
  element('x', DisplayType.INLINE, ElementType.CONTAINER, [], [], '')) # Inline display without the phrasing category.

# Coverage: every element yields the exact overload count for its shape.
for d in ELEMENTS:
  accs = element_accessors(d)
  utest_val(2 if d.element_type == ElementType.VOID else 4, len(accs), f'{d.name} accessor count')
  utest_val(1, len({a.name for a in accs}), f'{d.name} accessors share one name')

utest_val('object_', element_accessors(elements_by_name['object'])[0].name)
utest_val('del_', element_accessors(elements_by_name['del'])[0].name)
