# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Disambiguation of attribute names that are defined under more than one scope.
'''

from collections import defaultdict
from typing import Iterable

from .naming import scoped_identifier, to_identifier
from .semantics import AttrDescriptor, AttrScope


class ConflictResolver:
  '''
  Decides accessor names for attribute descriptors.
  A name registered under two or more scopes is a conflicting name:
  its general accessor is suffixed with the scope token, and so is any enum value accessor
  whose identifier is produced by more than one scope of that name.
  All decisions are made up front from the complete table, so they do not depend on table order.
  '''

  def __init__(self, attributes:Iterable[AttrDescriptor]) -> None:
    scopes_by_name:defaultdict[str,set[AttrScope]] = defaultdict(set)
    # For each conflicting name, the scopes that produce each unsuffixed enum value identifier.
    value_ids:defaultdict[str,defaultdict[str,set[AttrScope]]] = defaultdict(lambda: defaultdict(set))
    descriptors = [d for d in attributes if not d.is_open_ended]
    for d in descriptors:
      scopes_by_name[d.name].add(d.scope)
    self.conflicting_names = frozenset(n for n, scopes in scopes_by_name.items() if len(scopes) > 1)
    for d in descriptors:
      if d.name not in self.conflicting_names: continue
      for v in d.enum_values:
        value_ids[d.name][to_identifier(f'{d.name}_{v}')].add(d.scope)
    self.colliding_value_ids = frozenset(
      (name, ident) for name, ids in value_ids.items() for ident, scopes in ids.items() if len(scopes) > 1)


  def is_conflicting(self, descriptor:AttrDescriptor) -> bool:
    return descriptor.name in self.conflicting_names


  def general_name(self, descriptor:AttrDescriptor) -> str:
    'The name of the general (string or boolean) accessor for `descriptor`.'
    if self.is_conflicting(descriptor): return scoped_identifier(descriptor.name, descriptor.scope)
    return to_identifier(descriptor.name)


  def enum_value_name(self, descriptor:AttrDescriptor, value:str) -> str:
    'The name of the zero-argument factory for one enum value of `descriptor`.'
    raw = f'{descriptor.name}_{value}'
    name = to_identifier(raw)
    if (descriptor.name, name) in self.colliding_value_ids: return scoped_identifier(raw, descriptor.scope)
    return name
