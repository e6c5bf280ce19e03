# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Fold element and attribute names into identifiers for the generated Python modules.
Reserved words get a single `_`-suffixed name (`class_`, `for_`); there is no `Attr`-suffixed alias such as `classAttr`.
'''

import re
from keyword import kwlist

from .exceptions import IdentifierError
from .semantics import AttrScope


py_builtin_type_names = frozenset({
  'bool',
  'bytearray',
  'bytes',
  'complex',
  'dict',
  'float',
  'frozenset',
  'int',
  'list',
  'memoryview',
  'object',
  'range',
  'set',
  'slice',
  'str',
  'tuple',
  'type',
})

# Names that a generated accessor must not take: keywords are syntax errors, and builtin type names
# would shadow the annotations used throughout the generated modules.
reserved_words = frozenset(kwlist) | py_builtin_type_names

reserved_suffix = '_'
fallback_identifier = 'attr'
digit_marker = 'attr'


SCOPE_TOKENS:dict[AttrScope,str] = {
  AttrScope.UNIVERSAL: 'Global',
  AttrScope.FORM_ELEMENTS: 'Form',
  AttrScope.MEDIA_ELEMENTS: 'Media',
  AttrScope.LINK_ELEMENTS: 'Link',
  AttrScope.TABLE_ELEMENTS: 'Table',
  AttrScope.INTERACTIVE_ELEMENTS: 'Interactive',
  AttrScope.METADATA_ELEMENTS: 'Meta',
  AttrScope.SPECIFIC_ELEMENTS: 'Specific',
}


separator_re = re.compile(r'[-._\s/+:;,=]+')


def to_identifier(raw:str) -> str:
  '''
  Fold `raw` into a lower camel case identifier.
  Leading underscores are dropped; separator runs split the name into segments;
  the first segment is lowered, and each later segment is capitalized.
  An empty result becomes `attr`; a leading digit gets the `attr` prefix; reserved words get the `_` suffix.
  Raises IdentifierError if the folded name is still not a valid identifier.
  '''
  segments = separator_re.split(raw.lstrip('_'))
  head = segments[0].lower()
  tail = ''.join(s[0].upper() + s[1:].lower() for s in segments[1:] if s)
  name = head + tail
  if not name: name = fallback_identifier
  elif name[0].isdigit(): name = digit_marker + name
  if name in reserved_words: name += reserved_suffix
  if not is_valid_identifier(name):
    raise IdentifierError(f'name cannot be folded into an identifier: {raw!r} -> {name!r}')
  return name


def is_valid_identifier(name:str) -> bool:
  return name.isidentifier() and name not in reserved_words


def scoped_identifier(raw:str, scope:AttrScope) -> str:
  'Fold `raw` and append the token for `scope`, e.g. `typeForm`.'
  return to_identifier(f'{raw}-{SCOPE_TOKENS[scope]}')
