# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from dataclasses import dataclass
from keyword import iskeyword
from os.path import join as path_join

from .exceptions import ConfigError


@dataclass(frozen=True)
class GenConfig:
  '''
  Options for emitting the generated modules.
  `runtime_module` and `semantics_module` are the import paths that the generated code refers to.
  `license` is an optional line placed at the top of each generated file.
  '''
  output_dir:str = '.'
  tags_module:str = 'tags'
  attrs_module:str = 'attrs'
  runtime_module:str = 'hdsl.nodes'
  semantics_module:str = 'hdsl.semantics'
  license:str = ''

  def __post_init__(self) -> None:
    for label, name in [('tags module', self.tags_module), ('attrs module', self.attrs_module)]:
      if not is_module_name(name) or '.' in name: raise ConfigError(f'invalid {label} name: {name!r}')
    for label, name in [('runtime module', self.runtime_module), ('semantics module', self.semantics_module)]:
      if not is_module_name(name): raise ConfigError(f'invalid {label} path: {name!r}')
    if self.tags_module == self.attrs_module:
      raise ConfigError(f'tags and attrs modules must have different names: {self.tags_module!r}')
    if '\n' in self.license: raise ConfigError('license must be a single line.')

  @property
  def tags_path(self) -> str: return path_join(self.output_dir, self.tags_module + '.py')

  @property
  def attrs_path(self) -> str: return path_join(self.output_dir, self.attrs_module + '.py')


def is_module_name(name:str) -> bool:
  'Whether `name` is a dotted module path whose every part is an identifier.'
  return bool(name) and all(part.isidentifier() and not iskeyword(part) for part in name.split('.'))
