# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from hdsl.exceptions import IdentifierError
from hdsl.naming import is_valid_identifier, SCOPE_TOKENS, scoped_identifier, to_identifier
from hdsl.semantics import AttrScope
from utest import utest, utest_exc, utest_val


utest('id', to_identifier, 'id')
utest('acceptCharset', to_identifier, 'accept-charset')
utest('httpEquiv', to_identifier, 'http-equiv')
utest('ariaLabelledby', to_identifier, 'aria-labelledby')
utest('abcDef', to_identifier, 'ABC-DEF')
utest('aBCDEFGHIJ', to_identifier, 'a.b c/d+e:f;g,h=i--j')

# Leading underscores are dropped; interior underscore runs are separators.
utest('private', to_identifier, '_private')
utest('x', to_identifier, '__x')
utest('targetBlank', to_identifier, 'target__blank')
utest('typeDatetimeLocal', to_identifier, 'type_datetime-local')
utest('enctypeApplicationXWwwFormUrlencoded', to_identifier, 'enctype_application/x-www-form-urlencoded')

# Fallback and digit marker.
utest('attr', to_identifier, '')
utest('attr', to_identifier, '___')
utest('attr2col', to_identifier, '2col')
utest('attr3D', to_identifier, '3-D')

# Reserved words.
utest('class_', to_identifier, 'class')
utest('for_', to_identifier, 'for')
utest('del_', to_identifier, 'del')
utest('object_', to_identifier, 'object')
utest('str_', to_identifier, 'str')
utest('none', to_identifier, 'None') # Lowered before the reserved check.

utest_exc(IdentifierError, to_identifier, 'x!')
utest_exc(ValueError, to_identifier, 'a(b)')

utest(True, is_valid_identifier, 'class_')
utest(False, is_valid_identifier, 'class')
utest(False, is_valid_identifier, 'type')
utest(False, is_valid_identifier, '2x')

utest('typeForm', scoped_identifier, 'type', AttrScope.FORM_ELEMENTS)
utest('typeLink', scoped_identifier, 'type', AttrScope.LINK_ELEMENTS)
utest('sizeSpecific', scoped_identifier, 'size', AttrScope.SPECIFIC_ELEMENTS)
utest('charsetMeta', scoped_identifier, 'charset', AttrScope.METADATA_ELEMENTS)
utest('modeAForm', scoped_identifier, 'mode_a', AttrScope.FORM_ELEMENTS)

utest_val(set(AttrScope), set(SCOPE_TOKENS), 'every scope has a token')
utest_val(len(SCOPE_TOKENS), len(set(SCOPE_TOKENS.values())), 'scope tokens are distinct')
