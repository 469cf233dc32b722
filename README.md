# shelfbox

Keep repo-local files (notes, `.env` files, scratch configs) out of Git
while leaving them visible in your editor. Shelved files live in a global
store directory: each repository has its own manifest there
(`repos/<store_dir>/manifest.json`), a shared `index.json` records which
repositories are known, and `meta.json` gives the store a stable id.

This package reads, writes and maintains that store.

## Installation

```
pip install .
```

## Store location

The command line picks the store directory in this order:

1. the `--store PATH` option,
2. the `SHELFBOX_STORE` environment variable,
3. `$XDG_DATA_HOME/shelfbox` when `XDG_DATA_HOME` is an absolute path,
4. `~/.local/share/shelfbox`.

## Command line

```
shelfbox store info       # store path, repository count, item count, disk usage
shelfbox store verify     # check every manifest's links and store files
shelfbox store gc         # list index entries whose repository root no longer exists
shelfbox store gc --dry-run
shelfbox store gc --yes   # remove those entries and their store data
shelfbox config explain store
shelfbox config explain default_format
```

`--store PATH` may be given before `store`/`config` or after the subcommand.

- `store verify` prints each problem on standard error and exits with 2 if
  any were found, 0 otherwise.
- `store gc` without `--yes` only lists the stale entries; with `--yes` it
  deletes each entry's store directory, removes it from the index and saves
  the index.
- `config explain KEY` describes a configuration key: its type, default,
  description and precedence. An unknown key is an error.
- Any error is reported as `error: ...` on standard error with exit status 255.

## Library use

```python
from pathlib import Path
from shelfbox import index, manifest, meta

store_root = Path("~/.local/share/shelfbox").expanduser()
meta.ensure_store_meta(store_root)          # creates meta.json once
idx = index.load(store_root)                # empty index if index.json is absent
repo_id = idx.find_by_root("/home/user/myapp")
if repo_id is not None:
    entry = idx.get(repo_id)
    mf = manifest.load(store_root / "repos" / entry.store_dir)
    for item in mf.items:
        print(item.path, item.kind.value)
```

Other pieces:

- `index.Index` — `get`, `upsert`, `remove`, `iter`, `find_by_root`,
  `find_by_git_common_dir`; `index.save` writes it back.
- `manifest.Manifest` — `get`, `contains`, `add` (raises `ValueError` for a
  duplicate path), `remove`, `rename`; `manifest.save` writes it back.
  `manifest.load` raises `StoreError` when the file is missing or invalid.
- `maintenance` — `store_info`, `verify`, `find_stale`, `remove_stale`,
  `dir_size`, `human_bytes`.
- `format.OutputFormat.resolve` — picks an explicit format, else a
  configured `default_format`, else `table`.
- `paths.resolve_path` / `paths.normalize_path` — lexical path resolution
  that never touches the filesystem.
- `meta.new_ulid` and `meta.now_iso8601` — identifiers and timestamps.

Every write goes to a temporary file first and is then renamed into place,
so a crash part-way through cannot leave a corrupt file. Directories created
for store files get mode `0700`.

## What it does not do

The package works on the store alone. It does not shelve, restore, move or
repair items in a repository, does not create symlinks or edit
`.git/info/exclude`, does not run Git, and has no per-repository commands.
It does not read or write a `config.toml`: `config explain` only documents
the keys, and there are no `config get`, `list` or `set` commands.