# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Element classification table.
One descriptor per HTML element: content categories, display type, element type, valid parent contexts.
'''

from .semantics import ContentCategory, Context, DisplayType, element, element_table, ElementType


# Display types.
BLOCK = DisplayType.BLOCK
INLINE = DisplayType.INLINE
INLINE_BLOCK = DisplayType.INLINE_BLOCK
TABLE = DisplayType.TABLE
NONE = DisplayType.NONE

# Element types.
CONTAINER = ElementType.CONTAINER
VOID = ElementType.VOID
RAW_TEXT = ElementType.RAW_TEXT
ESCAPABLE_RAW_TEXT = ElementType.ESCAPABLE_RAW_TEXT

# Content categories.
FLOW = ContentCategory.FLOW
PHRASING = ContentCategory.PHRASING
METADATA = ContentCategory.METADATA
SECTIONING = ContentCategory.SECTIONING
HEADING = ContentCategory.HEADING
EMBEDDED = ContentCategory.EMBEDDED
INTERACTIVE = ContentCategory.INTERACTIVE
FORM_ASSOCIATED = ContentCategory.FORM_ASSOCIATED
SCRIPT_SUPPORTING = ContentCategory.SCRIPT_SUPPORTING
TRANSPARENT = ContentCategory.TRANSPARENT

# Contexts.
ROOT_CTX = Context.ROOT_CTX
HTML_CTX = Context.HTML_CTX
HEAD_CTX = Context.HEAD_CTX
FLOW_CTX = Context.FLOW_CTX
PHRASING_CTX = Context.PHRASING_CTX
TABLE_CTX = Context.TABLE_CTX
TR_CTX = Context.TR_CTX
COLGROUP_CTX = Context.COLGROUP_CTX
DL_CTX = Context.DL_CTX
UL_CTX = Context.UL_CTX
OL_CTX = Context.OL_CTX
FIGURE_CTX = Context.FIGURE_CTX
FIELDSET_CTX = Context.FIELDSET_CTX
DETAILS_CTX = Context.DETAILS_CTX
MAP_CTX = Context.MAP_CTX
RUBY_CTX = Context.RUBY_CTX
SELECT_CTX = Context.SELECT_CTX
DATALIST_CTX = Context.DATALIST_CTX
PICTURE_CTX = Context.PICTURE_CTX
AUDIO_CTX = Context.AUDIO_CTX
VIDEO_CTX = Context.VIDEO_CTX


# Void elements that create structural boundaries; all other void elements flow inline.
BLOCK_VOID_TAGS = frozenset({
  'base',
  'hr',
  'link',
  'meta',
})


ELEMENTS = element_table(
  element('a', INLINE, CONTAINER, [PHRASING, INTERACTIVE, FLOW], [PHRASING_CTX], 'Hyperlink'),
  element('abbr', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Abbreviation'),
  element('address', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Contact information'),
  element('area', NONE, VOID, [PHRASING, INTERACTIVE, FLOW], [MAP_CTX], 'Image map area'),
  element('article', BLOCK, CONTAINER, [FLOW, SECTIONING], [FLOW_CTX], 'Independent content'),
  element('aside', BLOCK, CONTAINER, [FLOW, SECTIONING], [FLOW_CTX], 'Sidebar content'),
  element('audio', INLINE_BLOCK, CONTAINER, [PHRASING, EMBEDDED, INTERACTIVE, FLOW], [PHRASING_CTX], 'Audio content'),
  element('b', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Bold text'),
  element('base', NONE, VOID, [METADATA], [HEAD_CTX], 'Document base URL'),
  element('bdi', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Bidirectional isolation'),
  element('bdo', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Bidirectional override'),
  element('blockquote', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Block quotation'),
  element('body', BLOCK, CONTAINER, [SECTIONING], [HTML_CTX], 'Document body'),
  element('br', INLINE, VOID, [PHRASING, FLOW], [PHRASING_CTX], 'Line break'),
  element('button', INLINE_BLOCK, CONTAINER, [PHRASING, INTERACTIVE, FORM_ASSOCIATED, FLOW], [PHRASING_CTX], 'Button'),
  element('canvas', INLINE_BLOCK, CONTAINER, [PHRASING, EMBEDDED, FLOW], [PHRASING_CTX], 'Graphics canvas'),
  element('caption', TABLE, CONTAINER, [], [TABLE_CTX], 'Table caption'),
  element('cite', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Citation'),
  element('code', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Code fragment'),
  element('col', TABLE, VOID, [], [COLGROUP_CTX], 'Table column'),
  element('colgroup', TABLE, CONTAINER, [], [TABLE_CTX], 'Table column group'),
  element('data', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Machine-readable data'),
  element('datalist', NONE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Input options'),
  element('dd', BLOCK, CONTAINER, [], [DL_CTX], 'Description list description'),
  element('del', INLINE, CONTAINER, [PHRASING, FLOW, TRANSPARENT], [PHRASING_CTX, FLOW_CTX], 'Deleted text'),
  element('details', BLOCK, CONTAINER, [FLOW, INTERACTIVE], [FLOW_CTX], 'Disclosure widget'),
  element('dfn', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Definition term'),
  element('dialog', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Dialog box'),
  element('div', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Generic container'),
  element('dl', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Description list'),
  element('dt', BLOCK, CONTAINER, [], [DL_CTX], 'Description list term'),
  element('em', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Emphasized text'),
  element('embed', INLINE_BLOCK, VOID, [PHRASING, EMBEDDED, INTERACTIVE, FLOW], [PHRASING_CTX], 'External application'),
  element('fieldset', BLOCK, CONTAINER, [FLOW, FORM_ASSOCIATED], [FLOW_CTX], 'Form field group'),
  element('figcaption', BLOCK, CONTAINER, [], [FIGURE_CTX], 'Figure caption'),
  element('figure', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Figure with caption'),
  element('footer', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Footer'),
  element('form', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Form'),
  element('h1', BLOCK, CONTAINER, [FLOW, HEADING], [FLOW_CTX], 'Level 1 heading'),
  element('h2', BLOCK, CONTAINER, [FLOW, HEADING], [FLOW_CTX], 'Level 2 heading'),
  element('h3', BLOCK, CONTAINER, [FLOW, HEADING], [FLOW_CTX], 'Level 3 heading'),
  element('h4', BLOCK, CONTAINER, [FLOW, HEADING], [FLOW_CTX], 'Level 4 heading'),
  element('h5', BLOCK, CONTAINER, [FLOW, HEADING], [FLOW_CTX], 'Level 5 heading'),
  element('h6', BLOCK, CONTAINER, [FLOW, HEADING], [FLOW_CTX], 'Level 6 heading'),
  element('head', NONE, CONTAINER, [], [HTML_CTX], 'Document head'),
  element('header', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Header'),
  element('hgroup', BLOCK, CONTAINER, [FLOW, HEADING], [FLOW_CTX], 'Heading group'),
  element('hr', BLOCK, VOID, [FLOW], [FLOW_CTX], 'Horizontal rule'),
  element('html', BLOCK, CONTAINER, [], [ROOT_CTX], 'Document root'),
  element('i', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Italic text'),
  element('iframe', INLINE_BLOCK, CONTAINER, [PHRASING, EMBEDDED, INTERACTIVE, FLOW], [PHRASING_CTX], 'Inline frame'),
  element('img', INLINE_BLOCK, VOID, [PHRASING, EMBEDDED, INTERACTIVE, FORM_ASSOCIATED, FLOW], [PHRASING_CTX], 'Image'),
  element('input', INLINE_BLOCK, VOID, [PHRASING, INTERACTIVE, FORM_ASSOCIATED, FLOW], [PHRASING_CTX], 'Form input'),
  element('ins', INLINE, CONTAINER, [PHRASING, FLOW, TRANSPARENT], [PHRASING_CTX, FLOW_CTX], 'Inserted text'),
  element('kbd', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Keyboard input'),
  element('label', INLINE, CONTAINER, [PHRASING, INTERACTIVE, FORM_ASSOCIATED, FLOW], [PHRASING_CTX], 'Form label'),
  element('legend', BLOCK, CONTAINER, [], [FIELDSET_CTX], 'Fieldset legend'),
  element('li', BLOCK, CONTAINER, [], [UL_CTX, OL_CTX], 'List item'),
  element('link', NONE, VOID, [METADATA, PHRASING, FLOW], [HEAD_CTX, PHRASING_CTX], 'External resource link'),
  element('main', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Main content'),
  element('map', INLINE, CONTAINER, [PHRASING, FLOW, TRANSPARENT], [PHRASING_CTX], 'Image map'),
  element('mark', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Marked text'),
  element('math', INLINE_BLOCK, CONTAINER, [PHRASING, EMBEDDED, FLOW], [PHRASING_CTX], 'MathML math'),
  element('menu', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Menu'),
  element('meta', NONE, VOID, [METADATA], [HEAD_CTX], 'Metadata'),
  element('meter', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Scalar measurement'),
  element('nav', BLOCK, CONTAINER, [FLOW, SECTIONING], [FLOW_CTX], 'Navigation'),
  element('noscript', INLINE, CONTAINER, [METADATA, PHRASING, FLOW], [HEAD_CTX, PHRASING_CTX], 'No script fallback'),
  element('object', INLINE_BLOCK, CONTAINER, [PHRASING, EMBEDDED, INTERACTIVE, FORM_ASSOCIATED, FLOW],
    [PHRASING_CTX], 'Generic object'),
  element('ol', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Ordered list'),
  element('optgroup', NONE, CONTAINER, [], [SELECT_CTX], 'Option group'),
  element('option', NONE, CONTAINER, [], [SELECT_CTX, DATALIST_CTX], 'Select option'),
  element('output', INLINE, CONTAINER, [PHRASING, FORM_ASSOCIATED, FLOW], [PHRASING_CTX], 'Form output'),
  element('p', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Paragraph'),
  element('picture', INLINE_BLOCK, CONTAINER, [PHRASING, EMBEDDED, FLOW], [PHRASING_CTX], 'Responsive image'),
  element('pre', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Preformatted text'),
  element('progress', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Progress indicator'),
  element('q', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Inline quotation'),
  element('rp', INLINE, CONTAINER, [], [RUBY_CTX], 'Ruby parenthesis'),
  element('rt', INLINE, CONTAINER, [], [RUBY_CTX], 'Ruby text'),
  element('ruby', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Ruby annotation'),
  element('s', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Strikethrough'),
  element('samp', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Sample output'),
  element('script', NONE, RAW_TEXT, [METADATA, PHRASING, FLOW, SCRIPT_SUPPORTING], [HEAD_CTX, PHRASING_CTX], 'Script'),
  element('search', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Search'),
  element('section', BLOCK, CONTAINER, [FLOW, SECTIONING], [FLOW_CTX], 'Document section'),
  element('select', INLINE_BLOCK, CONTAINER, [PHRASING, INTERACTIVE, FORM_ASSOCIATED, FLOW],
    [PHRASING_CTX], 'Select control'),
  element('slot', INLINE, CONTAINER, [PHRASING, FLOW, TRANSPARENT], [PHRASING_CTX], 'Shadow DOM slot'),
  element('small', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Small text'),
  element('source', NONE, VOID, [], [PICTURE_CTX, AUDIO_CTX, VIDEO_CTX], 'Media source'),
  element('span', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Generic inline'),
  element('strong', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Strong importance'),
  element('style', NONE, RAW_TEXT, [METADATA], [HEAD_CTX], 'Style information'),
  element('sub', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Subscript'),
  element('summary', BLOCK, CONTAINER, [], [DETAILS_CTX], 'Details summary'),
  element('sup', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Superscript'),
  element('svg', INLINE_BLOCK, CONTAINER, [PHRASING, EMBEDDED, FLOW], [PHRASING_CTX], 'SVG graphics'),
  element('table', TABLE, CONTAINER, [FLOW], [FLOW_CTX], 'Table'),
  element('tbody', TABLE, CONTAINER, [], [TABLE_CTX], 'Table body'),
  element('td', TABLE, CONTAINER, [], [TR_CTX], 'Table cell'),
  element('template', NONE, CONTAINER, [METADATA, PHRASING, FLOW, SCRIPT_SUPPORTING],
    [HEAD_CTX, PHRASING_CTX], 'Content template'),
  element('textarea', INLINE_BLOCK, ESCAPABLE_RAW_TEXT, [PHRASING, INTERACTIVE, FORM_ASSOCIATED, FLOW],
    [PHRASING_CTX], 'Text area'),
  element('tfoot', TABLE, CONTAINER, [], [TABLE_CTX], 'Table footer'),
  element('th', TABLE, CONTAINER, [], [TR_CTX], 'Table header cell'),
  element('thead', TABLE, CONTAINER, [], [TABLE_CTX], 'Table header'),
  element('time', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Date/time'),
  element('title', NONE, ESCAPABLE_RAW_TEXT, [METADATA], [HEAD_CTX], 'Document title'),
  element('tr', TABLE, CONTAINER, [], [TABLE_CTX], 'Table row'),
  element('track', NONE, VOID, [], [AUDIO_CTX, VIDEO_CTX], 'Media track'),
  element('u', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Underlined text'),
  element('ul', BLOCK, CONTAINER, [FLOW], [FLOW_CTX], 'Unordered list'),
  element('var', INLINE, CONTAINER, [PHRASING, FLOW], [PHRASING_CTX], 'Variable'),
  element('video', INLINE_BLOCK, CONTAINER, [PHRASING, EMBEDDED, INTERACTIVE, FLOW], [PHRASING_CTX], 'Video content'),
  element('wbr', INLINE, VOID, [PHRASING, FLOW], [PHRASING_CTX], 'Line break opportunity'),
)
