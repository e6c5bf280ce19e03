# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Reverse lookup maps from element name to classification.
Runtime nodes store only their tag and fetch classification from these maps on demand.
Lookups of unknown names return an empty set or None; they never raise.
'''

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .elements import ELEMENTS
from .semantics import ContentCategory, Context, DisplayType, ElementDescriptor, ElementType


@dataclass(frozen=True)
class MetadataMaps:
  content_categories:Mapping[str,frozenset[ContentCategory]]
  display_types:Mapping[str,DisplayType]
  element_types:Mapping[str,ElementType]
  valid_contexts:Mapping[str,frozenset[Context]]

  @classmethod
  def from_elements(cls, elements:Iterable[ElementDescriptor]) -> 'MetadataMaps':
    els = sorted(elements, key=lambda d: d.name)
    return cls(
      content_categories=MappingProxyType({d.name: d.content_categories for d in els}),
      display_types=MappingProxyType({d.name: d.display_type for d in els}),
      element_types=MappingProxyType({d.name: d.element_type for d in els}),
      valid_contexts=MappingProxyType({d.name: d.valid_contexts for d in els}))


  def __len__(self) -> int: return len(self.element_types)


default_maps = MetadataMaps.from_elements(ELEMENTS)


def content_categories_of(name:str, maps:MetadataMaps=default_maps) -> frozenset[ContentCategory]:
  return maps.content_categories.get(name, frozenset())

def display_type_of(name:str, maps:MetadataMaps=default_maps) -> Optional[DisplayType]:
  return maps.display_types.get(name)

def element_type_of(name:str, maps:MetadataMaps=default_maps) -> Optional[ElementType]:
  return maps.element_types.get(name)

def valid_contexts_of(name:str, maps:MetadataMaps=default_maps) -> frozenset[Context]:
  return maps.valid_contexts.get(name, frozenset())
