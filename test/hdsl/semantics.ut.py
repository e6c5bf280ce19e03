# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from hdsl.attributes import ATTRIBUTES
from hdsl.elements import BLOCK_VOID_TAGS, ELEMENTS
from hdsl.exceptions import TableError
from hdsl.semantics import (attr, attr_table, AttrCategory, AttrDescriptor, AttrScope, AttrType, ContentCategory, Context,
  DisplayType, element, element_table, ElementType, enum_attr)
from utest import utest, utest_exc, utest_val


FLOW = ContentCategory.FLOW
UNIVERSAL = AttrScope.UNIVERSAL


utest_val(114, len(ELEMENTS), 'element count')
utest_val(113, len(ATTRIBUTES), 'attribute count')
utest_val(frozenset({'base', 'hr', 'link', 'meta'}), BLOCK_VOID_TAGS)

elements_by_name = {d.name: d for d in ELEMENTS}
for tag in BLOCK_VOID_TAGS:
  utest_val(ElementType.VOID, elements_by_name[tag].element_type, f'{tag} is void')

utest_val(['size', 'type'], sorted({d.name for d in ATTRIBUTES if sum(1 for e in ATTRIBUTES if e.name == d.name) > 1}),
  'names defined under two scopes')

# Descriptor validation.
utest_exc(TableError, element, '', DisplayType.BLOCK, ElementType.CONTAINER, [FLOW], [Context.FLOW_CTX], '')
utest_exc(TableError, element, 'x', 'block', ElementType.CONTAINER, [FLOW], [Context.FLOW_CTX], '')
utest_exc(TableError, element, 'x', DisplayType.BLOCK, 'void', [FLOW], [Context.FLOW_CTX], '')
utest_exc(TableError, element, 'x', DisplayType.BLOCK, ElementType.CONTAINER, [Context.FLOW_CTX], [], '')
utest_exc(TableError, element, 'x', DisplayType.BLOCK, ElementType.CONTAINER, [FLOW], [FLOW], '')
utest_exc(TableError, element, 'x', DisplayType.BLOCK, ElementType.CONTAINER, [FLOW], [Context.FLOW_CTX, 'head'], '')

utest_exc(TableError, enum_attr, 'x', UNIVERSAL, [], 'no values')
utest_exc(TableError, enum_attr, 'x', UNIVERSAL, [], 'blank value', 'a', ' ')
utest_exc(TableError, attr, 'x', AttrType.ENUM, UNIVERSAL, [], 'enum without values')
utest_exc(TableError, attr, 'x', 'string', UNIVERSAL, [], '')
utest_exc(TableError, attr, 'x', AttrType.STRING, 'universal', [], '')
utest_exc(TableError, attr, 'x', AttrType.STRING, UNIVERSAL, [ContentCategory.FLOW], '')
utest_exc(TableError, attr, '', AttrType.STRING, UNIVERSAL, [], '')
utest_exc(TableError, AttrDescriptor, name='x', categories=frozenset(), type=AttrType.STRING, scope=UNIVERSAL,
  enum_values=frozenset({'a'}))
utest_exc(TableError, AttrDescriptor, name='x', categories=[AttrCategory.GLOBAL], type=AttrType.STRING, scope=UNIVERSAL)
utest_exc(ValueError, enum_attr, 'x', UNIVERSAL, [], 'TableError is a ValueError')

# Tables.
div = element('div', DisplayType.BLOCK, ElementType.CONTAINER, [FLOW], [Context.FLOW_CTX], 'Generic container')
utest_exc(TableError, element_table, div, div)
utest((div,), element_table, div)

type_form = enum_attr('type', AttrScope.FORM_ELEMENTS, [AttrCategory.FORM], '', 'text', 'button')
type_link = enum_attr('type', AttrScope.LINK_ELEMENTS, [AttrCategory.LINK], '', 'text/css')
utest((type_form, type_link), attr_table, type_form, type_link)
utest_exc(TableError, attr_table, type_form, enum_attr('type', AttrScope.FORM_ELEMENTS, [], '', 'image'))

# Properties.
utest_val(('type', AttrScope.FORM_ELEMENTS), type_form.key)
utest_val(['button', 'text'], type_form.sorted_enum_values)
utest_val(False, div.is_phrasing, 'div is phrasing')
utest_val(True, elements_by_name['span'].is_phrasing, 'span is phrasing')
utest_val(True, element('x', DisplayType.INLINE, ElementType.CONTAINER, [], [], '').is_phrasing, 'inline display is phrasing')
utest_val(True, element('x', DisplayType.NONE, ElementType.RAW_TEXT, [ContentCategory.PHRASING], [], '').is_phrasing,
  'phrasing category is phrasing')

data = attr('data-*', AttrType.STRING, UNIVERSAL, [AttrCategory.DATA], '')
onclick = attr('onclick', AttrType.SCRIPT, UNIVERSAL, [], '')
handler = attr('handler', AttrType.SCRIPT, UNIVERSAL, [AttrCategory.EVENT], '')
utest_val((True, False, True), (data.is_template, data.is_event, data.is_open_ended), 'data-*')
utest_val((False, True, True), (onclick.is_template, onclick.is_event, onclick.is_open_ended), 'onclick')
utest_val(True, handler.is_event, 'EVENT category')
utest_val(False, type_form.is_open_ended, 'type')
