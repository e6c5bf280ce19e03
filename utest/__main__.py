#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, makedirs, pathsep, walk
from os.path import join as path_join, relpath
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  cwd = getcwd()
  env = dict(environ)
  env['PYTHONPATH'] = pathsep.join(p for p in [cwd, env.get('PYTHONPATH', '')] if p)

  utest_cwd = '_build/_utest'
  makedirs(utest_cwd, exist_ok=True)
  ok = True
  for path in walk_test_files(args.paths):
    print(path)
    c = run([executable, relpath(path, utest_cwd)], cwd=utest_cwd, env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_test_files(paths:list[str]) -> list[str]:
  'Return the sorted `.ut.py` files found under each of `paths`.'
  found:list[str] = []
  for root_path in paths:
    if root_path.endswith('.ut.py'):
      found.append(root_path)
      continue
    for dir_path, dir_names, file_names in walk(root_path):
      dir_names.sort()
      found.extend(path_join(dir_path, n) for n in sorted(file_names) if n.endswith('.ut.py'))
  return found


if __name__ == '__main__': main()
