# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from operator import setitem

from hdsl.elements import ELEMENTS
from hdsl.metadata import (content_categories_of, default_maps, display_type_of, element_type_of, MetadataMaps,
  valid_contexts_of)
from hdsl.semantics import ContentCategory, Context, DisplayType, element, ElementType
from utest import utest, utest_exc, utest_val


utest(frozenset({ContentCategory.FLOW}), content_categories_of, 'div')
utest(DisplayType.BLOCK, display_type_of, 'div')
utest(ElementType.CONTAINER, element_type_of, 'div')
utest(frozenset({Context.FLOW_CTX}), valid_contexts_of, 'div')
utest(ElementType.VOID, element_type_of, 'br')
utest(ElementType.RAW_TEXT, element_type_of, 'script')
utest(frozenset({Context.UL_CTX, Context.OL_CTX}), valid_contexts_of, 'li')

# Misses are benign.
utest(frozenset(), content_categories_of, 'x-custom')
utest(None, display_type_of, 'x-custom')
utest(None, element_type_of, 'x-custom')
utest(frozenset(), valid_contexts_of, 'x-custom')

utest_val(len(ELEMENTS), len(default_maps))
utest_val(sorted(d.name for d in ELEMENTS), list(default_maps.element_types), 'maps are keyed in name order')

widget = element('widget', DisplayType.INLINE_BLOCK, ElementType.VOID, [ContentCategory.EMBEDDED], [], '')
maps = MetadataMaps.from_elements([widget])
utest(DisplayType.INLINE_BLOCK, display_type_of, 'widget', maps)
utest(None, display_type_of, 'div', maps)
utest_exc(TypeError, setitem, maps.display_types, 'div', DisplayType.BLOCK) # Read-only.
