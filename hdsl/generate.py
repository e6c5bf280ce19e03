# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The generation pass: classification tables in, sorted accessor descriptions and metadata maps out.
The pass is a pure function of table content; table order does not affect the result.
All defects (bad identifiers, duplicate accessors) are raised before anything is returned.
'''

from dataclasses import dataclass
from itertools import groupby
from typing import Iterable

from .accessors import Accessor
from .attributes import ATTRIBUTES
from .conflicts import ConflictResolver
from .elements import BLOCK_VOID_TAGS, ELEMENTS
from .exceptions import DuplicateAccessorError
from .gen_attributes import attr_accessors, special_accessors
from .gen_elements import element_accessors
from .metadata import MetadataMaps
from .semantics import attr_table, AttrDescriptor, AttrScope, element_table, ElementDescriptor


@dataclass(frozen=True)
class Generation:
  element_accessors:tuple[Accessor,...]
  attr_accessors:tuple[Accessor,...]
  metadata:MetadataMaps
  conflicting_names:frozenset[str]

  def element_groups(self) -> list[tuple[str,list[Accessor]]]:
    'Element accessors grouped by name, in name order.'
    return _group(self.element_accessors)

  def attr_groups(self) -> list[tuple[str,list[Accessor]]]:
    'Attribute accessors grouped by name, in name order.'
    return _group(self.attr_accessors)

  def stats(self) -> dict[str,int]:
    return {
      'elements': len(self.metadata),
      'element accessors': len(self.element_accessors),
      'element names': len(self.element_groups()),
      'attribute accessors': len(self.attr_accessors),
      'attribute names': len(self.attr_groups()),
      'conflicting attribute names': len(self.conflicting_names),
    }


def _group(accessors:Iterable[Accessor]) -> list[tuple[str,list[Accessor]]]:
  return [(name, list(group)) for name, group in groupby(accessors, key=lambda a: a.name)]


_scope_order = {s: i for i, s in enumerate(AttrScope)}


def generate(elements:Iterable[ElementDescriptor]=ELEMENTS, attributes:Iterable[AttrDescriptor]=ATTRIBUTES,
 block_void_tags:frozenset[str]=BLOCK_VOID_TAGS) -> Generation:
  els = sorted(element_table(*elements), key=lambda d: d.name)
  attrs = sorted(attr_table(*attributes), key=lambda d: (d.name, _scope_order[d.scope]))
  resolver = ConflictResolver(attrs)

  el_accs = [a for d in els for a in element_accessors(d, block_void_tags)]
  attr_accs = [a for d in attrs for a in attr_accessors(d, resolver)]
  attr_accs.extend(special_accessors())

  check_duplicates(el_accs)
  check_duplicates(attr_accs)

  return Generation(
    element_accessors=tuple(sorted(el_accs, key=lambda a: a.sort_key)),
    attr_accessors=tuple(sorted(attr_accs, key=lambda a: a.sort_key)),
    metadata=MetadataMaps.from_elements(els),
    conflicting_names=resolver.conflicting_names)


def check_duplicates(accessors:Iterable[Accessor]) -> None:
  '''
  Raise DuplicateAccessorError if two accessors share a signature,
  or if accessors from different descriptors share a name.
  Overloads of one name must all come from the same descriptor, since they are emitted as one function.
  '''
  by_signature:dict[tuple,Accessor] = {}
  origins:dict[str,str] = {}
  for a in accessors:
    prev = by_signature.get(a.signature)
    if prev is not None: raise DuplicateAccessorError(name=a.name, existing=prev.origin, incoming=a.origin)
    by_signature[a.signature] = a
    origin = origins.setdefault(a.name, a.origin)
    if origin != a.origin: raise DuplicateAccessorError(name=a.name, existing=origin, incoming=a.origin)
