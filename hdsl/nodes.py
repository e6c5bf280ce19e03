# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Runtime node model constructed by the generated accessors.

Elements hold only their tag, attributes and children.
Classification (display type, element type, categories, contexts) is looked up by tag in `hdsl.metadata` when needed.
Attributes are fragments too, so that a container accessor can take attributes and children in one argument list.
'''

from typing import Any, ClassVar, Iterable, Iterator, Optional

from .metadata import content_categories_of, display_type_of, element_type_of, valid_contexts_of
from .semantics import AttrScope, ContentCategory, Context, DisplayType, ElementType


class Frag:
  'Base class for everything that can be passed to a container accessor.'

  __slots__ = ()

  def _render(self) -> Iterator[str]: raise NotImplementedError

  def render(self, newline=True) -> Iterator[str]:
    'Render the fragment as a stream of text chunks.'
    yield from self._render()
    if newline: yield '\n'

  def render_str(self, newline=True) -> str:
    'Render the fragment into a single string.'
    return ''.join(self.render(newline=newline))


def esc_text(text:str) -> str:
  text = text.replace("&", "&amp;") # Ampersand must be replaced first, because escapes use ampersands.
  text = text.replace("<", "&lt;")
  return text


def quote_attr_val(text:str) -> str:
  text = text.replace("&", "&amp;")
  text = text.replace("<", "&lt;")
  if "'" in text:
    text = text.replace('"', "&quot;")
    return f'"{text}"'
  else:
    return f"'{text}'"


class Text(Frag):
  __slots__ = ('text',)

  def __init__(self, text:str) -> None:
    if not isinstance(text, str): raise TypeError(f'text must be a str; received: {text!r}')
    self.text = text

  def __repr__(self) -> str: return f'Text({self.text!r})'

  def __eq__(self, other:Any) -> bool:
    return type(self) is type(other) and self.text == other.text

  def _render(self) -> Iterator[str]:
    yield esc_text(self.text)


# Attributes.

class Attr(Frag):
  '''
  An attribute value. `value` is a str, or a bool for boolean attributes.
  Scoped attributes also carry the scope whose definition of the name they were built from; otherwise `scope` is None.
  '''

  __slots__ = ('name', 'value', 'scope')

  def __init__(self, name:str, value:Any, scope:Optional[AttrScope]=None) -> None:
    if not name: raise ValueError('attribute name is empty.')
    if scope is not None and not isinstance(scope, AttrScope):
      raise TypeError(f'attribute {name!r}: scope must be an AttrScope; received: {scope!r}')
    self.name = name
    self.value = value
    self.scope = scope

  def __repr__(self) -> str:
    scope = '' if self.scope is None else f', {self.scope}'
    return f'{type(self).__name__}({self.name!r}, {self.value!r}{scope})'

  def __eq__(self, other:Any) -> bool:
    return (type(self) is type(other) and self.name == other.name and self.value == other.value
      and self.scope == other.scope)

  def __hash__(self) -> int: return hash((type(self), self.name, self.value, self.scope))

  @property
  def is_present(self) -> bool: return True

  def fmt_item(self) -> str:
    'Return the attribute formatted with a leading space, or the empty string if it is absent.'
    return f' {self.name}={quote_attr_val(self.value)}'

  def _render(self) -> Iterator[str]:
    yield self.fmt_item().lstrip()


class StringAttr(Attr):
  __slots__ = ()

  def __init__(self, name:str, value:str, scope:Optional[AttrScope]=None) -> None:
    if not isinstance(value, str): raise TypeError(f'attribute {name!r}: value must be a str; received: {value!r}')
    super().__init__(name, value, scope)


class EnumAttr(StringAttr):
  'An enumerated attribute value. Values outside the enumerated set are accepted.'
  __slots__ = ()


class BooleanAttr(Attr):
  'A boolean attribute renders with an empty value when present, and is omitted when absent.'

  __slots__ = ()

  def __init__(self, name:str, value:bool=True, scope:Optional[AttrScope]=None) -> None:
    if not isinstance(value, bool): raise TypeError(f'attribute {name!r}: value must be a bool; received: {value!r}')
    super().__init__(name, value, scope)

  @property
  def is_present(self) -> bool: return bool(self.value)

  def fmt_item(self) -> str:
    return f" {self.name}=''" if self.value else ''


class ScopedStringAttr(StringAttr):
  __slots__ = ()

  def __init__(self, name:str, value:str, scope:AttrScope) -> None:
    if scope is None: raise TypeError(f'scoped attribute {name!r} requires a scope.')
    super().__init__(name, value, scope)


class ScopedEnumAttr(EnumAttr):
  __slots__ = ()

  def __init__(self, name:str, value:str, scope:AttrScope) -> None:
    if scope is None: raise TypeError(f'scoped attribute {name!r} requires a scope.')
    super().__init__(name, value, scope)


class ScopedBooleanAttr(BooleanAttr):
  __slots__ = ()

  def __init__(self, name:str, value:bool, scope:AttrScope) -> None:
    if scope is None: raise TypeError(f'scoped attribute {name!r} requires a scope.')
    super().__init__(name, value, scope)


# Elements.

class Element(Frag):
  '''
  Base element type. Attributes are kept in insertion order; setting a name twice keeps the last value.
  Elements are not iterable; a container accessor treats any iterable argument as a sequence of children.
  '''

  __slots__ = ('tag', 'attrs', 'children')

  is_inline:ClassVar[bool] = False
  is_void:ClassVar[bool] = False

  tag:str
  attrs:dict[str,Attr]
  children:list[Frag]

  def __init__(self, tag:str, attrs:Iterable[Attr]=(), children:Iterable[Frag]=()) -> None:
    if not tag: raise ValueError('element tag is empty.')
    self.tag = tag
    self.attrs = {}
    for a in attrs:
      self.attrs[a.name] = a
    self.children = list(children)

  def __repr__(self) -> str:
    parts = [repr(self.tag), *(repr(a) for a in self.attrs.values()), *(repr(c) for c in self.children)]
    return f'{type(self).__name__}({", ".join(parts)})'

  def __eq__(self, other:Any) -> bool:
    return (type(self) is type(other) and self.tag == other.tag and self.attrs == other.attrs
      and self.children == other.children)

  # Classification, looked up by tag.

  @property
  def content_categories(self) -> frozenset[ContentCategory]: return content_categories_of(self.tag)

  @property
  def display_type(self) -> Optional[DisplayType]: return display_type_of(self.tag)

  @property
  def element_type(self) -> Optional[ElementType]: return element_type_of(self.tag)

  @property
  def valid_contexts(self) -> frozenset[Context]: return valid_contexts_of(self.tag)

  @property
  def is_ws_sensitive(self) -> bool:
    return self.tag == 'pre' or self.element_type in (ElementType.RAW_TEXT, ElementType.ESCAPABLE_RAW_TEXT)

  # Rendering.

  def render(self, newline=True) -> Iterator[str]:
    if self.tag == 'html': yield '<!DOCTYPE html>\n'
    yield from super().render(newline=newline)

  def _render(self) -> Iterator[str]:
    attrs_str = ''.join(a.fmt_item() for a in self.attrs.values())
    yield f'<{self.tag}{attrs_str}>'
    if self.is_void: return
    yield from self.render_children()
    yield f'</{self.tag}>'

  def render_children(self) -> Iterator[str]:
    children = self.children
    child_newlines = len(children) > 1 and not self.is_ws_sensitive and not self.is_inline
    raw = self.element_type == ElementType.RAW_TEXT

    def is_block(frag:Optional[Frag]) -> bool: return isinstance(frag, Element) and not frag.is_inline

    if child_newlines: yield '\n'
    for i, child in enumerate(children):
      next_child = children[i+1] if i + 1 < len(children) else None
      if raw and isinstance(child, Text): yield child.text
      else: yield from child._render()
      if child_newlines and (is_block(child) or next_child is None or is_block(next_child)):
        yield '\n'


class ContainerElement(Element):
  __slots__ = ()

class BlockContainerElement(ContainerElement):
  __slots__ = ()

class InlineContainerElement(ContainerElement):
  __slots__ = ()
  is_inline = True


class VoidElement(Element):
  'Void elements have attributes but never children.'
  __slots__ = ()
  is_void = True

  def __init__(self, tag:str, attrs:Iterable[Attr]=()) -> None:
    super().__init__(tag, attrs=attrs)

class BlockVoidElement(VoidElement):
  __slots__ = ()

class InlineVoidElement(VoidElement):
  __slots__ = ()
  is_inline = True


# Constructors called by the generated accessors.

def _split_container_args(tag:str, args:tuple[Any,...]) -> tuple[list[Attr],list[Frag]]:
  '''
  Sort container arguments into attributes and children.
  Each argument is an attribute, a fragment, a string (wrapped as Text), or an iterable of those.
  '''
  attrs:list[Attr] = []
  children:list[Frag] = []

  def add(arg:Any, nested:bool) -> None:
    if isinstance(arg, Attr): attrs.append(arg)
    elif isinstance(arg, Frag): children.append(arg)
    elif isinstance(arg, str): children.append(Text(arg))
    elif not nested and isinstance(arg, Iterable):
      for el in arg: add(el, nested=True)
    else:
      raise TypeError(f'{tag!r}: expected a fragment, attribute, str, or iterable of those; received: {arg!r}')

  for arg in args: add(arg, nested=False)
  return attrs, children


def _check_void_args(tag:str, args:tuple[Any,...]) -> tuple[Attr,...]:
  for arg in args:
    if not isinstance(arg, Attr): raise TypeError(f'{tag!r} is a void element and takes only attributes; received: {arg!r}')
  return args


def block_container(tag:str, *args:Any) -> BlockContainerElement:
  attrs, children = _split_container_args(tag, args)
  return BlockContainerElement(tag, attrs=attrs, children=children)

def inline_container(tag:str, *args:Any) -> InlineContainerElement:
  attrs, children = _split_container_args(tag, args)
  return InlineContainerElement(tag, attrs=attrs, children=children)

def block_void_element(tag:str, *attrs:Attr) -> BlockVoidElement:
  return BlockVoidElement(tag, attrs=_check_void_args(tag, attrs))

def inline_void_element(tag:str, *attrs:Attr) -> InlineVoidElement:
  return InlineVoidElement(tag, attrs=_check_void_args(tag, attrs))


def string_attribute(name:str, value:str) -> StringAttr: return StringAttr(name, value)

def boolean_attribute(name:str, present:bool=True) -> BooleanAttr: return BooleanAttr(name, present)

def enum_attribute(name:str, value:str) -> EnumAttr: return EnumAttr(name, value)

def scoped_string_attribute(name:str, value:str, scope:AttrScope) -> ScopedStringAttr:
  return ScopedStringAttr(name, value, scope)

def scoped_boolean_attribute(name:str, present:bool, scope:AttrScope) -> ScopedBooleanAttr:
  return ScopedBooleanAttr(name, present, scope)

def scoped_enum_attribute(name:str, value:str, scope:AttrScope) -> ScopedEnumAttr:
  return ScopedEnumAttr(name, value, scope)
