# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised while building classification tables and generating accessors.
All of these are generation-time defects; nothing here is raised by the runtime node model.
'''

from typing import Any


class HdslError(Exception):
  'Base class for all errors raised by the generator.'


class TableError(HdslError, ValueError):
  'Raised when a classification table entry violates an invariant of its descriptor type.'


class IdentifierError(HdslError, ValueError):
  'Raised when a name cannot be folded into a usable identifier for the generated modules.'


class DuplicateAccessorError(HdslError, KeyError):
  '''
  Raised when two accessors collide in the generated namespace.
  It subclasses KeyError because the collision is on an accessor name.
  `existing` and `incoming` describe the origins of the colliding accessors.
  '''
  def __init__(self, *, name:str, existing:Any, incoming:Any) -> None:
    self.name = name
    self.existing = existing
    self.incoming = incoming
    super().__init__(name)

  def __str__(self) -> str:
    return f'duplicate accessor {self.name!r}: {self.existing} collides with {self.incoming}'


class ConfigError(HdslError, ValueError):
  'Raised for invalid generation options.'


class EmitError(HdslError, ValueError):
  'Raised when a group of accessors cannot be rendered as a single Python function.'
