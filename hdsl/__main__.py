#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import makedirs

from .config import GenConfig
from .emit import emit_modules, load_module
from .exceptions import HdslError
from .generate import generate
from .io import errL, errSL, outL


def main() -> None:
  parser = ArgumentParser(prog='hdsl', description='Generate HTML builder accessor modules from the classification tables.')
  parser.add_argument('-output-dir', default='.', help='Directory to write the generated modules to.')
  parser.add_argument('-tags-module', default='tags', help='Module name for the element accessors.')
  parser.add_argument('-attrs-module', default='attrs', help='Module name for the attribute accessors.')
  parser.add_argument('-runtime-module', default='hdsl.nodes', help='Import path of the node runtime.')
  parser.add_argument('-license', default='', help='License line for the top of each generated file.')
  parser.add_argument('-check', action='store_true',
    help='Do not write; exit with status 1 if any existing generated file is missing or stale.')
  parser.add_argument('-stats', action='store_true', help='Print accessor statistics.')
  parser.add_argument('-dbg', action='store_true', help='Verbose debug printing.')
  args = parser.parse_args()
  dbg = args.dbg

  try:
    config = GenConfig(output_dir=args.output_dir, tags_module=args.tags_module, attrs_module=args.attrs_module,
      runtime_module=args.runtime_module, license=args.license)
    generation = generate()
    outputs = emit_modules(generation, config)
    for path, source in outputs:
      load_module(path, source) # Fail before writing anything if the generated source does not run.
  except HdslError as e:
    exit(f'hdsl error: {e}')

  if dbg:
    for name, accs in generation.element_groups() + generation.attr_groups():
      errSL('accessor:', name)
      for a in accs: errSL('  ', a.describe(), '<-', a.origin)

  if args.stats:
    for label, count in generation.stats().items():
      outL(f'{label}: {count}')

  if args.check:
    stale = [path for path, source in outputs if read_existing(path) != source]
    for path in stale: errL(f'stale: {path}')
    exit(1 if stale else 0)

  makedirs(config.output_dir, exist_ok=True)
  for path, source in outputs:
    if read_existing(path) == source:
      if dbg: errSL('unchanged:', path)
      continue
    with open(path, 'w') as f: f.write(source)
    if dbg: errSL('wrote:', path)


def read_existing(path:str) -> str|None:
  try:
    with open(path) as f: return f.read()
  except FileNotFoundError: return None


if __name__ == '__main__': main()
