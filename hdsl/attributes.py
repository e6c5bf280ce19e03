# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Attribute classification table.
The key of each descriptor is the (name, scope) pair; `type` and `size` are each defined under two scopes.
'''

from .semantics import attr, attr_table, AttrCategory, AttrScope, AttrType, enum_attr


# Value types. ENUM is implied by `enum_attr`.
STRING = AttrType.STRING
BOOLEAN = AttrType.BOOLEAN
NUMBER = AttrType.NUMBER
URL = AttrType.URL
TOKEN_LIST = AttrType.TOKEN_LIST
COMMA_LIST = AttrType.COMMA_LIST
COLOR = AttrType.COLOR
DIMENSION = AttrType.DIMENSION
LANGUAGE = AttrType.LANGUAGE
CHARSET = AttrType.CHARSET
REGEX = AttrType.REGEX
SCRIPT = AttrType.SCRIPT

# Scopes.
UNIVERSAL = AttrScope.UNIVERSAL
FORM_ELEMENTS = AttrScope.FORM_ELEMENTS
MEDIA_ELEMENTS = AttrScope.MEDIA_ELEMENTS
LINK_ELEMENTS = AttrScope.LINK_ELEMENTS
TABLE_ELEMENTS = AttrScope.TABLE_ELEMENTS
INTERACTIVE_ELEMENTS = AttrScope.INTERACTIVE_ELEMENTS
METADATA_ELEMENTS = AttrScope.METADATA_ELEMENTS
SPECIFIC_ELEMENTS = AttrScope.SPECIFIC_ELEMENTS

# Categories.
GLOBAL = AttrCategory.GLOBAL
FORM = AttrCategory.FORM
MEDIA = AttrCategory.MEDIA
LINK = AttrCategory.LINK
TABLE = AttrCategory.TABLE
INTERACTIVE = AttrCategory.INTERACTIVE
METADATA = AttrCategory.METADATA
ACCESSIBILITY = AttrCategory.ACCESSIBILITY
MICRODATA = AttrCategory.MICRODATA
DATA = AttrCategory.DATA
EVENT = AttrCategory.EVENT
DEPRECATED = AttrCategory.DEPRECATED


ATTRIBUTES = attr_table(
  # Global attributes.
  attr('accesskey', STRING, UNIVERSAL, [GLOBAL], 'Keyboard shortcut for element'),
  attr('class', TOKEN_LIST, UNIVERSAL, [GLOBAL], 'CSS class names'),
  enum_attr('contenteditable', UNIVERSAL, [GLOBAL], 'Whether content is editable', 'true', 'false', 'plaintext-only'),
  enum_attr('dir', UNIVERSAL, [GLOBAL], 'Text directionality', 'ltr', 'rtl', 'auto'),
  attr('draggable', BOOLEAN, UNIVERSAL, [GLOBAL], 'Whether element is draggable'),
  attr('hidden', BOOLEAN, UNIVERSAL, [GLOBAL], 'Whether element is hidden'),
  attr('id', STRING, UNIVERSAL, [GLOBAL], 'Unique identifier'),
  attr('lang', LANGUAGE, UNIVERSAL, [GLOBAL], 'Language of element content'),
  attr('spellcheck', BOOLEAN, UNIVERSAL, [GLOBAL], 'Whether to check spelling'),
  attr('style', STRING, UNIVERSAL, [GLOBAL], 'Inline CSS styles'),
  attr('tabindex', NUMBER, UNIVERSAL, [GLOBAL], 'Tab order for keyboard navigation'),
  attr('title', STRING, UNIVERSAL, [GLOBAL], 'Advisory information about element'),
  enum_attr('translate', UNIVERSAL, [GLOBAL], 'Whether content should be translated', 'yes', 'no'),

  # Data attributes (template).
  attr('data-*', STRING, UNIVERSAL, [GLOBAL, DATA], 'Custom data attributes'),

  # Event handler attributes (common ones).
  attr('onclick', SCRIPT, UNIVERSAL, [GLOBAL, EVENT], 'Click event handler'),
  attr('onload', SCRIPT, UNIVERSAL, [GLOBAL, EVENT], 'Load event handler'),
  attr('onchange', SCRIPT, UNIVERSAL, [GLOBAL, EVENT], 'Change event handler'),
  attr('onsubmit', SCRIPT, UNIVERSAL, [GLOBAL, EVENT], 'Submit event handler'),
  attr('onfocus', SCRIPT, UNIVERSAL, [GLOBAL, EVENT], 'Focus event handler'),
  attr('onblur', SCRIPT, UNIVERSAL, [GLOBAL, EVENT], 'Blur event handler'),

  # ARIA attributes (selection).
  attr('aria-label', STRING, UNIVERSAL, [ACCESSIBILITY], 'Accessible name for element'),
  attr('aria-labelledby', TOKEN_LIST, UNIVERSAL, [ACCESSIBILITY], 'IDs of elements that label this element'),
  attr('aria-describedby', TOKEN_LIST, UNIVERSAL, [ACCESSIBILITY], 'IDs of elements that describe this element'),
  attr('aria-hidden', BOOLEAN, UNIVERSAL, [ACCESSIBILITY], 'Whether element is hidden from assistive technology'),
  enum_attr('aria-expanded', UNIVERSAL, [ACCESSIBILITY], 'Whether collapsible element is expanded',
    'true', 'false', 'undefined'),

  # Form attributes.
  attr('accept', COMMA_LIST, FORM_ELEMENTS, [FORM], 'File types the server accepts'),
  attr('accept-charset', TOKEN_LIST, FORM_ELEMENTS, [FORM], 'Character encodings for form submission'),
  attr('action', URL, FORM_ELEMENTS, [FORM], 'URL for form submission'),
  enum_attr('autocomplete', FORM_ELEMENTS, [FORM], 'Whether form control should have autocomplete',
    'on', 'off', 'name', 'email', 'username', 'current-password', 'new-password'),
  attr('autofocus', BOOLEAN, FORM_ELEMENTS, [FORM], 'Whether element should be focused on page load'),
  attr('checked', BOOLEAN, FORM_ELEMENTS, [FORM], 'Whether input is checked'),
  attr('disabled', BOOLEAN, FORM_ELEMENTS, [FORM], 'Whether form control is disabled'),
  enum_attr('enctype', FORM_ELEMENTS, [FORM], 'Encoding type for form submission',
    'application/x-www-form-urlencoded', 'multipart/form-data', 'text/plain'),
  attr('for', STRING, FORM_ELEMENTS, [FORM], 'ID of form control this label is for'),
  attr('form', STRING, FORM_ELEMENTS, [FORM], 'ID of form this element belongs to'),
  attr('formaction', URL, FORM_ELEMENTS, [FORM], 'URL for form submission (overrides form action)'),
  enum_attr('formenctype', FORM_ELEMENTS, [FORM], 'Encoding type (overrides form enctype)',
    'application/x-www-form-urlencoded', 'multipart/form-data', 'text/plain'),
  enum_attr('formmethod', FORM_ELEMENTS, [FORM], 'HTTP method (overrides form method)', 'get', 'post'),
  attr('formnovalidate', BOOLEAN, FORM_ELEMENTS, [FORM], 'Skip form validation on submission'),
  attr('formtarget', STRING, FORM_ELEMENTS, [FORM], 'Target for form submission (overrides form target)'),
  attr('max', STRING, FORM_ELEMENTS, [FORM], 'Maximum value for input'),
  attr('maxlength', NUMBER, FORM_ELEMENTS, [FORM], 'Maximum number of characters'),
  enum_attr('method', FORM_ELEMENTS, [FORM], 'HTTP method for form submission', 'get', 'post'),
  attr('min', STRING, FORM_ELEMENTS, [FORM], 'Minimum value for input'),
  attr('minlength', NUMBER, FORM_ELEMENTS, [FORM], 'Minimum number of characters'),
  attr('multiple', BOOLEAN, FORM_ELEMENTS, [FORM], 'Whether multiple values are allowed'),
  attr('name', STRING, FORM_ELEMENTS, [FORM], 'Name of form control'),
  attr('novalidate', BOOLEAN, FORM_ELEMENTS, [FORM], 'Skip form validation'),
  attr('pattern', REGEX, FORM_ELEMENTS, [FORM], 'Regular expression for input validation'),
  attr('placeholder', STRING, FORM_ELEMENTS, [FORM], 'Placeholder text for input'),
  attr('readonly', BOOLEAN, FORM_ELEMENTS, [FORM], 'Whether form control is read-only'),
  attr('required', BOOLEAN, FORM_ELEMENTS, [FORM], 'Whether form control is required'),
  attr('selected', BOOLEAN, FORM_ELEMENTS, [FORM], 'Whether option is selected'),
  attr('size', NUMBER, FORM_ELEMENTS, [FORM], 'Size of form control'),
  attr('step', STRING, FORM_ELEMENTS, [FORM], 'Step value for numeric inputs'),
  enum_attr('target', FORM_ELEMENTS, [FORM], 'Target for form submission', '_blank', '_self', '_parent', '_top'),
  enum_attr('type', FORM_ELEMENTS, [FORM], 'Type of input control',
    'text', 'password', 'email', 'url', 'tel', 'search', 'number', 'range',
    'date', 'time', 'datetime-local', 'month', 'week', 'color', 'file',
    'hidden', 'checkbox', 'radio', 'submit', 'reset', 'button', 'image'),
  attr('value', STRING, FORM_ELEMENTS, [FORM], 'Value of form control'),

  # Media attributes.
  attr('alt', STRING, MEDIA_ELEMENTS, [MEDIA], 'Alternative text for image'),
  attr('autoplay', BOOLEAN, MEDIA_ELEMENTS, [MEDIA], 'Whether media should autoplay'),
  attr('controls', BOOLEAN, MEDIA_ELEMENTS, [MEDIA], 'Whether media controls should be shown'),
  enum_attr('crossorigin', MEDIA_ELEMENTS, [MEDIA], 'CORS settings for media', 'anonymous', 'use-credentials'),
  attr('height', DIMENSION, MEDIA_ELEMENTS, [MEDIA], 'Height of media element'),
  attr('loop', BOOLEAN, MEDIA_ELEMENTS, [MEDIA], 'Whether media should loop'),
  attr('muted', BOOLEAN, MEDIA_ELEMENTS, [MEDIA], 'Whether media should be muted'),
  enum_attr('preload', MEDIA_ELEMENTS, [MEDIA], 'How media should be preloaded', 'none', 'metadata', 'auto'),
  attr('poster', URL, MEDIA_ELEMENTS, [MEDIA], 'Poster image for video'),
  attr('src', URL, MEDIA_ELEMENTS, [MEDIA], 'Source URL for media'),
  attr('srcset', STRING, MEDIA_ELEMENTS, [MEDIA], 'Set of source images with descriptors'),
  attr('width', DIMENSION, MEDIA_ELEMENTS, [MEDIA], 'Width of media element'),

  # Link attributes.
  attr('download', STRING, LINK_ELEMENTS, [LINK], 'Filename for download'),
  attr('href', URL, LINK_ELEMENTS, [LINK], 'Hyperlink reference'),
  attr('hreflang', LANGUAGE, LINK_ELEMENTS, [LINK], 'Language of linked resource'),
  attr('ping', TOKEN_LIST, LINK_ELEMENTS, [LINK], 'URLs to ping when link is followed'),
  enum_attr('referrerpolicy', LINK_ELEMENTS, [LINK], 'Referrer policy for link',
    'no-referrer', 'no-referrer-when-downgrade', 'origin', 'origin-when-cross-origin',
    'same-origin', 'strict-origin', 'strict-origin-when-cross-origin', 'unsafe-url'),
  enum_attr('rel', LINK_ELEMENTS, [LINK], 'Relationship to linked resource',
    'alternate', 'author', 'bookmark', 'canonical', 'dns-prefetch', 'external', 'help', 'icon',
    'license', 'manifest', 'next', 'nofollow', 'noopener', 'noreferrer', 'opener', 'prev',
    'preconnect', 'prefetch', 'preload', 'prerender', 'search', 'stylesheet', 'tag'),
  attr('sizes', TOKEN_LIST, LINK_ELEMENTS, [LINK], 'Sizes of linked resource (for icons)'),
  enum_attr('type', LINK_ELEMENTS, [LINK], 'MIME type of linked resource',
    'text/css', 'text/javascript', 'image/x-icon', 'application/rss+xml'),

  # Table attributes.
  attr('colspan', NUMBER, TABLE_ELEMENTS, [TABLE], 'Number of columns cell spans'),
  attr('rowspan', NUMBER, TABLE_ELEMENTS, [TABLE], 'Number of rows cell spans'),
  attr('headers', TOKEN_LIST, TABLE_ELEMENTS, [TABLE], 'IDs of header cells for this cell'),
  enum_attr('scope', TABLE_ELEMENTS, [TABLE], 'Scope of header cell', 'row', 'col', 'rowgroup', 'colgroup'),
  attr('span', NUMBER, TABLE_ELEMENTS, [TABLE], 'Number of columns in column group'),

  # Interactive attributes.
  attr('open', BOOLEAN, INTERACTIVE_ELEMENTS, [INTERACTIVE], 'Whether details element is open'),

  # Metadata attributes.
  attr('charset', CHARSET, METADATA_ELEMENTS, [METADATA], 'Character encoding'),
  attr('content', STRING, METADATA_ELEMENTS, [METADATA], 'Value of meta element'),
  attr('http-equiv', STRING, METADATA_ELEMENTS, [METADATA], 'HTTP header name'),
  attr('media', STRING, METADATA_ELEMENTS, [METADATA], 'Media query for linked resource'),

  # Microdata attributes.
  attr('itemid', URL, UNIVERSAL, [MICRODATA], 'Global identifier for microdata item'),
  attr('itemprop', TOKEN_LIST, UNIVERSAL, [MICRODATA], 'Microdata property names'),
  attr('itemref', TOKEN_LIST, UNIVERSAL, [MICRODATA], 'IDs of additional microdata properties'),
  attr('itemscope', BOOLEAN, UNIVERSAL, [MICRODATA], 'Whether element is microdata item'),
  attr('itemtype', URL, UNIVERSAL, [MICRODATA], 'Microdata vocabulary URL'),

  # Specific element attributes.
  attr('coords', COMMA_LIST, SPECIFIC_ELEMENTS, [], 'Coordinates for area element'),
  enum_attr('shape', SPECIFIC_ELEMENTS, [], 'Shape of area element', 'rect', 'circle', 'poly', 'default'),
  attr('usemap', STRING, SPECIFIC_ELEMENTS, [], 'Name of image map to use'),
  enum_attr('wrap', SPECIFIC_ELEMENTS, [], 'How text should wrap in textarea', 'soft', 'hard'),
  attr('rows', NUMBER, SPECIFIC_ELEMENTS, [], 'Number of rows in textarea'),
  attr('cols', NUMBER, SPECIFIC_ELEMENTS, [], 'Number of columns in textarea'),
  attr('start', NUMBER, SPECIFIC_ELEMENTS, [], 'Starting number for ordered list'),
  attr('reversed', BOOLEAN, SPECIFIC_ELEMENTS, [], 'Whether ordered list is reversed'),
  enum_attr('kind', SPECIFIC_ELEMENTS, [], 'Kind of text track',
    'subtitles', 'captions', 'descriptions', 'chapters', 'metadata'),
  attr('srclang', LANGUAGE, SPECIFIC_ELEMENTS, [], 'Language of text track'),
  attr('label', STRING, SPECIFIC_ELEMENTS, [], 'User-readable title for text track'),
  attr('default', BOOLEAN, SPECIFIC_ELEMENTS, [], 'Whether track should be enabled by default'),

  # Deprecated attributes (common ones still encountered).
  attr('align', STRING, SPECIFIC_ELEMENTS, [DEPRECATED], 'Alignment (deprecated, use CSS)'),
  attr('bgcolor', COLOR, SPECIFIC_ELEMENTS, [DEPRECATED], 'Background color (deprecated, use CSS)'),
  attr('border', NUMBER, SPECIFIC_ELEMENTS, [DEPRECATED], 'Border width (deprecated, use CSS)'),
  attr('cellpadding', NUMBER, SPECIFIC_ELEMENTS, [DEPRECATED], 'Cell padding (deprecated, use CSS)'),
  attr('cellspacing', NUMBER, SPECIFIC_ELEMENTS, [DEPRECATED], 'Cell spacing (deprecated, use CSS)'),
  attr('color', COLOR, SPECIFIC_ELEMENTS, [DEPRECATED], 'Text color (deprecated, use CSS)'),
  attr('face', STRING, SPECIFIC_ELEMENTS, [DEPRECATED], 'Font face (deprecated, use CSS)'),
  attr('size', NUMBER, SPECIFIC_ELEMENTS, [DEPRECATED], 'Font size (deprecated, use CSS)'),
)
