# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Abstract accessor descriptions: the output of the overload-set generators and the input of the emitter.
An accessor is a name, a parameter list, and a body that is a single call to one of a fixed set of constructors.
'''

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .semantics import AttrScope


class ParamKind(Enum):
  VARIADIC_FRAGMENTS = 'variadic-fragments'
  ITERABLE_FRAGMENTS = 'iterable-fragments'
  VARIADIC_TEXT = 'variadic-text'
  VARIADIC_ATTRS = 'variadic-attrs'
  STRING = 'string'
  BOOL = 'bool'

  @property
  def is_variadic(self) -> bool:
    return self in _variadic_param_kinds


_variadic_param_kinds = frozenset({ParamKind.VARIADIC_FRAGMENTS, ParamKind.VARIADIC_TEXT, ParamKind.VARIADIC_ATTRS})


class ResultKind(Enum):
  BLOCK_CONTAINER = 'BlockContainerElement'
  INLINE_CONTAINER = 'InlineContainerElement'
  BLOCK_VOID = 'BlockVoidElement'
  INLINE_VOID = 'InlineVoidElement'
  ATTRIBUTE = 'Attr'


class Ctor(Enum):
  'The underlying constructors that accessor bodies delegate to. Values are the constructor function names.'
  BLOCK_CONTAINER = 'block_container'
  INLINE_CONTAINER = 'inline_container'
  BLOCK_VOID_ELEMENT = 'block_void_element'
  INLINE_VOID_ELEMENT = 'inline_void_element'
  STRING_ATTRIBUTE = 'string_attribute'
  BOOLEAN_ATTRIBUTE = 'boolean_attribute'
  ENUM_ATTRIBUTE = 'enum_attribute'
  SCOPED_STRING_ATTRIBUTE = 'scoped_string_attribute'
  SCOPED_BOOLEAN_ATTRIBUTE = 'scoped_boolean_attribute'
  SCOPED_ENUM_ATTRIBUTE = 'scoped_enum_attribute'

  @property
  def result(self) -> ResultKind: return _ctor_results[self]

  @property
  def scoped(self) -> 'Ctor':
    'The scoped counterpart of an attribute constructor.'
    return _scoped_ctors[self]


_ctor_results = {
  Ctor.BLOCK_CONTAINER: ResultKind.BLOCK_CONTAINER,
  Ctor.INLINE_CONTAINER: ResultKind.INLINE_CONTAINER,
  Ctor.BLOCK_VOID_ELEMENT: ResultKind.BLOCK_VOID,
  Ctor.INLINE_VOID_ELEMENT: ResultKind.INLINE_VOID,
  Ctor.STRING_ATTRIBUTE: ResultKind.ATTRIBUTE,
  Ctor.BOOLEAN_ATTRIBUTE: ResultKind.ATTRIBUTE,
  Ctor.ENUM_ATTRIBUTE: ResultKind.ATTRIBUTE,
  Ctor.SCOPED_STRING_ATTRIBUTE: ResultKind.ATTRIBUTE,
  Ctor.SCOPED_BOOLEAN_ATTRIBUTE: ResultKind.ATTRIBUTE,
  Ctor.SCOPED_ENUM_ATTRIBUTE: ResultKind.ATTRIBUTE,
}

_scoped_ctors = {
  Ctor.STRING_ATTRIBUTE: Ctor.SCOPED_STRING_ATTRIBUTE,
  Ctor.BOOLEAN_ATTRIBUTE: Ctor.SCOPED_BOOLEAN_ATTRIBUTE,
  Ctor.ENUM_ATTRIBUTE: Ctor.SCOPED_ENUM_ATTRIBUTE,
}


@dataclass(frozen=True)
class Param:
  name:str
  kind:ParamKind


@dataclass(frozen=True)
class Lit:
  'A literal argument: a tag or attribute name, an enum value, a presence flag, or a scope.'
  val:Union[str,bool,AttrScope]


@dataclass(frozen=True)
class Ref:
  'Pass the named parameter through.'
  param:str


@dataclass(frozen=True)
class Prefixed:
  'Pass the named string parameter with a literal prefix prepended.'
  prefix:str
  param:str


Arg = Union[Lit,Ref,Prefixed]


@dataclass(frozen=True)
class Call:
  ctor:Ctor
  args:tuple[Arg,...]


@dataclass(frozen=True)
class Accessor:
  '''
  One overload of a generated accessor.
  `origin` describes the descriptor that produced the accessor, for error messages.
  '''
  name:str
  params:tuple[Param,...]
  call:Call
  origin:str
  doc:str = ''

  def __post_init__(self) -> None:
    for p in self.params[:-1]:
      if p.kind.is_variadic: raise ValueError(f'accessor {self.name!r}: variadic parameter must be last: {p}')
    param_names = {p.name for p in self.params}
    for a in self.call.args:
      if isinstance(a, (Ref, Prefixed)) and a.param not in param_names:
        raise ValueError(f'accessor {self.name!r}: body refers to unknown parameter: {a.param!r}')

  @property
  def signature(self) -> tuple[str,tuple[ParamKind,...]]:
    return (self.name, tuple(p.kind for p in self.params))

  @property
  def result(self) -> ResultKind: return self.call.ctor.result

  @property
  def arity(self) -> int: return len(self.params)

  @property
  def is_variadic(self) -> bool: return bool(self.params) and self.params[-1].kind.is_variadic

  @property
  def sort_key(self) -> tuple[str,int,tuple[str,...],str]:
    return (self.name, self.arity, tuple(p.kind.value for p in self.params), self.origin)

  def describe(self) -> str:
    params = ', '.join(f'{p.name}:{p.kind.value}' for p in self.params)
    return f'{self.name}({params}) -> {self.result.value}'
