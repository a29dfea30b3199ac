# nodeprune

A small terminal tool that walks a directory tree, finds every `node_modules`
directory and shows how much space each one takes. It then lets you pick
directories to delete.

## Installation

```
pip install .
```

## Usage

```
nodeprune scan --path ~/projects
```

`--path` (also accepted as `-path`) sets the directory to scan. If you leave it
out, the scan starts at `/`.

Before the scan starts, nodeprune asks you to confirm. When the scan is done, it
shows:

- how many `node_modules` directories it found, how long the scan took, and the
  total space they use;
- a tree of the 30 largest directories, with paths shown relative to the scan
  root and their sizes;
- a table that sorts the directories into size groups: Huge (> 1GB),
  Large (100MB-1GB), Medium (10MB-100MB), Small (1MB-10MB) and Tiny (< 1MB),
  with the count and total size of each.

If any directories were found, it then asks whether you want to prune. If you
do, it lists them with numbers; type the numbers to delete, separated by commas
or spaces, or leave the answer blank for none. After one more confirmation the
chosen directories are deleted.

Nested `node_modules` directories are counted as part of their outermost parent
and are not listed on their own. Symbolic links are not followed, and entries
that cannot be read are skipped.

If you run `nodeprune` with no subcommand, or with one it does not know, it
prints `Expected 'scan' subcommand` and exits. If a prompt is interrupted or a
directory cannot be removed, it prints `error: ...` to standard error and exits
with status 1.

## Using it from Python

```python
from nodeprune.helpers import scan_node_modules, format_size, dir_size
from nodeprune.scanner import Scanner, size_distribution
```

- `scan_node_modules(root_path)` returns a list of `NodeModuleInfo` records
  (`path`, `size`), largest first.
- `dir_size(path)` returns the total size in bytes of the files under `path`.
- `format_size(num_bytes)` turns a byte count into text such as `1.50 MB`.
- `remove_directory(path)` deletes a directory and everything in it; a missing
  path is not an error.
- `size_distribution(results)` groups `NodeModuleInfo` records into
  `SizeBucket` objects (`name`, `minimum`, `maximum`, `count`, `total`).
- `Scanner(root_path, console=None)` runs the interactive workflow:
  `confirm_scan()`, `scan()`, `display_results()` and `ask_for_pruning()`.
  `prune(paths)` deletes the given paths without asking. Failures raise
  `ScannerError`.
- `nodeprune.app.main(argv=None)` runs the command line and returns the exit
  status.