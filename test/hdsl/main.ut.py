# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from os.path import exists, join as path_join
from shutil import rmtree
from subprocess import CompletedProcess, run
from sys import executable
from tempfile import mkdtemp

from hdsl.config import GenConfig
from hdsl.emit import emit_modules
from hdsl.generate import generate
from utest import utest_val


def hdsl(*args:str) -> CompletedProcess:
  return run([executable, '-m', 'hdsl', *args], capture_output=True, text=True)


out = mkdtemp(prefix='hdsl-main-')
tags_path = path_join(out, 'tags.py')
attrs_path = path_join(out, 'attrs.py')

# Writes both modules.
p = hdsl('-output-dir', out)
utest_val(0, p.returncode, 'write exit status')
utest_val('', p.stderr, 'write stderr')
expected = dict(emit_modules(generate(), GenConfig(output_dir=out)))
for path in [tags_path, attrs_path]:
  utest_val(True, exists(path), f'{path} written')
  with open(path) as f: utest_val(expected[path], f.read(), f'{path} contents')

# Unchanged files are left alone.
p = hdsl('-output-dir', out, '-dbg')
utest_val(0, p.returncode, 'rerun exit status')
utest_val(True, f'unchanged: {tags_path}\n' in p.stderr, 'tags unchanged')
utest_val(True, f'unchanged: {attrs_path}\n' in p.stderr, 'attrs unchanged')
utest_val(False, 'wrote:' in p.stderr, 'nothing rewritten')

# Check mode reports stale files without writing.
p = hdsl('-output-dir', out, '-check')
utest_val(0, p.returncode, 'check exit status when current')
with open(attrs_path, 'a') as f: f.write('# edited\n')
p = hdsl('-output-dir', out, '-check')
utest_val(1, p.returncode, 'check exit status when stale')
utest_val(f'stale: {attrs_path}\n', p.stderr, 'check stderr when stale')
with open(attrs_path) as f: utest_val(True, f.read().endswith('# edited\n'), 'check does not write')

# Stats are printed, and the stale file is rewritten.
p = hdsl('-output-dir', out, '-stats')
utest_val(0, p.returncode, 'stats exit status')
utest_val(True, 'elements: 114\n' in p.stdout, 'element count')
utest_val(True, 'conflicting attribute names: 2\n' in p.stdout, 'conflicting name count')
utest_val(0, hdsl('-output-dir', out, '-check').returncode, 'check exit status after rewrite')

# Configuration errors exit with a message.
p = hdsl('-output-dir', out, '-tags-module', 'x', '-attrs-module', 'x')
utest_val(1, p.returncode, 'config error exit status')
utest_val("hdsl error: tags and attrs modules must have different names: 'x'\n", p.stderr, 'config error stderr')
utest_val(False, exists(path_join(out, 'x.py')), 'nothing written on error')

rmtree(out)
