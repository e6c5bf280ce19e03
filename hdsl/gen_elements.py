# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Element overload-set generator.
Every element yields one family of accessors that share the folded tag name:
container-like elements get four overloads, void elements get two.
'''

from typing import assert_never

from .accessors import Accessor, Call, Ctor, Lit, Param, ParamKind, Ref
from .elements import BLOCK_VOID_TAGS
from .naming import to_identifier
from .semantics import ElementDescriptor, ElementType


def element_shape(descriptor:ElementDescriptor, block_void_tags:frozenset[str]=BLOCK_VOID_TAGS) -> Ctor:
  'Choose the constructor family for `descriptor`.'
  match descriptor.element_type:
    case ElementType.CONTAINER | ElementType.RAW_TEXT | ElementType.ESCAPABLE_RAW_TEXT:
      return Ctor.INLINE_CONTAINER if descriptor.is_phrasing else Ctor.BLOCK_CONTAINER
    case ElementType.VOID:
      return Ctor.BLOCK_VOID_ELEMENT if descriptor.name in block_void_tags else Ctor.INLINE_VOID_ELEMENT
    case _ as unreachable:
      assert_never(unreachable)


def element_accessors(descriptor:ElementDescriptor, block_void_tags:frozenset[str]=BLOCK_VOID_TAGS) -> list[Accessor]:
  ctor = element_shape(descriptor, block_void_tags)
  name = to_identifier(descriptor.name)
  tag = Lit(descriptor.name)
  origin = f'element {descriptor.name!r}'
  doc = descriptor.desc

  def acc(*params:Param) -> Accessor:
    return Accessor(name, params, Call(ctor, (tag, *(Ref(p.name) for p in params))), origin=origin, doc=doc)

  match ctor:
    case Ctor.BLOCK_CONTAINER | Ctor.INLINE_CONTAINER:
      return [
        acc(Param('children', ParamKind.VARIADIC_FRAGMENTS)),
        acc(Param('children', ParamKind.ITERABLE_FRAGMENTS)),
        acc(Param('texts', ParamKind.VARIADIC_TEXT)),
        acc(),
      ]
    case Ctor.BLOCK_VOID_ELEMENT | Ctor.INLINE_VOID_ELEMENT:
      return [
        acc(Param('attrs', ParamKind.VARIADIC_ATTRS)),
        acc(),
      ]
    case _:
      raise ValueError(f'not an element constructor: {ctor}')
