# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
HTML classification model: closed enumerations and the descriptor types that make up the classification tables.

Each enumeration is closed; descriptors reject members of any other type at construction time.
Content categories, contexts and attribute categories are non-exclusive sets.
Display type, element type, attribute type and attribute scope are each exactly one member.
'''

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .exceptions import TableError


class ContentCategory(Enum):
  FLOW = 'flow'
  PHRASING = 'phrasing'
  METADATA = 'metadata'
  SECTIONING = 'sectioning'
  HEADING = 'heading'
  EMBEDDED = 'embedded'
  INTERACTIVE = 'interactive'
  FORM_ASSOCIATED = 'form-associated'
  SCRIPT_SUPPORTING = 'script-supporting'
  TRANSPARENT = 'transparent'


class DisplayType(Enum):
  'Layout role of an element.'
  BLOCK = 'block'
  INLINE = 'inline'
  INLINE_BLOCK = 'inline-block'
  TABLE = 'table'
  NONE = 'none'


class ElementType(Enum):
  'Content model of an element: whether it holds children, and how child text is interpreted.'
  CONTAINER = 'container'
  VOID = 'void'
  RAW_TEXT = 'raw-text'
  ESCAPABLE_RAW_TEXT = 'escapable-raw-text'


class Context(Enum):
  'Parent contexts in which an element may legally appear. Informational only; never enforced.'
  ROOT_CTX = 'root'
  HTML_CTX = 'html'
  HEAD_CTX = 'head'
  FLOW_CTX = 'flow'
  PHRASING_CTX = 'phrasing'
  TABLE_CTX = 'table'
  TR_CTX = 'tr'
  COLGROUP_CTX = 'colgroup'
  DL_CTX = 'dl'
  UL_CTX = 'ul'
  OL_CTX = 'ol'
  FIGURE_CTX = 'figure'
  FIELDSET_CTX = 'fieldset'
  DETAILS_CTX = 'details'
  MAP_CTX = 'map'
  RUBY_CTX = 'ruby'
  SELECT_CTX = 'select'
  DATALIST_CTX = 'datalist'
  PICTURE_CTX = 'picture'
  AUDIO_CTX = 'audio'
  VIDEO_CTX = 'video'


class AttrCategory(Enum):
  GLOBAL = 'global'
  FORM = 'form'
  MEDIA = 'media'
  LINK = 'link'
  TABLE = 'table'
  INTERACTIVE = 'interactive'
  METADATA = 'metadata'
  ACCESSIBILITY = 'accessibility'
  MICRODATA = 'microdata'
  DATA = 'data'
  EVENT = 'event'
  DEPRECATED = 'deprecated'


class AttrType(Enum):
  'Wire/semantic shape of an attribute value.'
  STRING = 'string'
  BOOLEAN = 'boolean'
  ENUM = 'enum'
  NUMBER = 'number'
  URL = 'url'
  TOKEN_LIST = 'token-list'
  COMMA_LIST = 'comma-list'
  COLOR = 'color'
  DIMENSION = 'dimension'
  LANGUAGE = 'language'
  CHARSET = 'charset'
  REGEX = 'regex'
  SCRIPT = 'script'


class AttrScope(Enum):
  '''
  The family of elements that an attribute variant applies to.
  Together with the attribute name, the scope is the true key of an attribute descriptor:
  the same name can be defined with different semantics for different families.
  '''
  UNIVERSAL = 'universal'
  FORM_ELEMENTS = 'form'
  MEDIA_ELEMENTS = 'media'
  LINK_ELEMENTS = 'link'
  TABLE_ELEMENTS = 'table'
  INTERACTIVE_ELEMENTS = 'interactive'
  METADATA_ELEMENTS = 'metadata'
  SPECIFIC_ELEMENTS = 'specific'


template_marker = '*' # Wildcard marker in template names like 'data-*'.
event_prefix = 'on'


@dataclass(frozen=True)
class ElementDescriptor:
  name:str
  content_categories:frozenset[ContentCategory]
  display_type:DisplayType
  element_type:ElementType
  valid_contexts:frozenset[Context]
  desc:str = ''

  def __post_init__(self) -> None:
    name = self.name
    if not name: raise TableError('element descriptor has an empty name.')
    if not isinstance(self.display_type, DisplayType):
      raise TableError(f'element {name!r}: display type is not a DisplayType: {self.display_type!r}')
    if not isinstance(self.element_type, ElementType):
      raise TableError(f'element {name!r}: element type is not an ElementType: {self.element_type!r}')
    _check_members(f'element {name!r}', 'content category', self.content_categories, ContentCategory)
    _check_members(f'element {name!r}', 'context', self.valid_contexts, Context)


  @property
  def is_phrasing(self) -> bool:
    'Whether the element flows inline with text: phrasing content, or classified with an inline display type.'
    return ContentCategory.PHRASING in self.content_categories or self.display_type == DisplayType.INLINE


@dataclass(frozen=True)
class AttrDescriptor:
  '''
  `enum_values` is non-empty if and only if `type` is ENUM.
  Several descriptors may share a name if their scopes differ; see `key`.
  '''
  name:str
  categories:frozenset[AttrCategory]
  type:AttrType
  scope:AttrScope
  enum_values:frozenset[str] = frozenset()
  desc:str = ''

  def __post_init__(self) -> None:
    name = self.name
    if not name: raise TableError('attribute descriptor has an empty name.')
    if not isinstance(self.type, AttrType):
      raise TableError(f'attribute {name!r}: type is not an AttrType: {self.type!r}')
    if not isinstance(self.scope, AttrScope):
      raise TableError(f'attribute {name!r}: scope is not an AttrScope: {self.scope!r}')
    _check_members(f'attribute {name!r}', 'category', self.categories, AttrCategory)
    if self.type == AttrType.ENUM:
      if not self.enum_values: raise TableError(f'enum attribute {name!r} has no enum values.')
      for v in self.enum_values:
        if not isinstance(v, str) or not v.strip():
          raise TableError(f'enum attribute {name!r} has an invalid enum value: {v!r}')
    elif self.enum_values:
      raise TableError(f'attribute {name!r} of type {self.type.name} has enum values: {sorted(self.enum_values)}')


  @property
  def key(self) -> tuple[str,AttrScope]: return (self.name, self.scope)

  @property
  def is_template(self) -> bool: return template_marker in self.name

  @property
  def is_event(self) -> bool:
    return AttrCategory.EVENT in self.categories or self.name.startswith(event_prefix)

  @property
  def is_open_ended(self) -> bool:
    'Template and event handler names cannot be enumerated; they are served by fixed generic accessors.'
    return self.is_template or self.is_event

  @property
  def sorted_enum_values(self) -> list[str]: return sorted(self.enum_values)


def _check_members(subject:str, label:str, members:frozenset, enum_type:type[Enum]) -> None:
  if not isinstance(members, frozenset):
    raise TableError(f'{subject}: {label} set must be a frozenset; received: {members!r}')
  for m in members:
    if not isinstance(m, enum_type):
      raise TableError(f'{subject}: {label} is not a {enum_type.__name__}: {m!r}')


# Table authoring helpers.

def element(name:str, display:DisplayType, type_:ElementType, categories:Iterable[ContentCategory],
 contexts:Iterable[Context], desc:str) -> ElementDescriptor:
  return ElementDescriptor(name=name, content_categories=frozenset(categories), display_type=display,
    element_type=type_, valid_contexts=frozenset(contexts), desc=desc)


def attr(name:str, type_:AttrType, scope:AttrScope, categories:Iterable[AttrCategory], desc:str) -> AttrDescriptor:
  return AttrDescriptor(name=name, categories=frozenset(categories), type=type_, scope=scope, desc=desc)


def enum_attr(name:str, scope:AttrScope, categories:Iterable[AttrCategory], desc:str, *values:str) -> AttrDescriptor:
  return AttrDescriptor(name=name, categories=frozenset(categories), type=AttrType.ENUM, scope=scope,
    enum_values=frozenset(values), desc=desc)


def element_table(*descriptors:ElementDescriptor) -> tuple[ElementDescriptor,...]:
  'Build an element table, rejecting duplicate names.'
  seen:set[str] = set()
  for d in descriptors:
    if d.name in seen: raise TableError(f'duplicate element descriptor: {d.name!r}')
    seen.add(d.name)
  return descriptors


def attr_table(*descriptors:AttrDescriptor) -> tuple[AttrDescriptor,...]:
  'Build an attribute table, rejecting duplicate (name, scope) keys.'
  seen:set[tuple[str,AttrScope]] = set()
  for d in descriptors:
    if d.key in seen: raise TableError(f'duplicate attribute descriptor: {d.name!r} in scope {d.scope.name}')
    seen.add(d.key)
  return descriptors
