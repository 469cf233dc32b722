from pathlib import Path

import pytest

from shelfbox import index as index_mod
from shelfbox import manifest as manifest_mod
from shelfbox.index import Index, RepoEntry
from shelfbox.maintenance import (
    StaleEntry,
    dir_size,
    find_stale,
    human_bytes,
    remove_stale,
    store_info,
    verify,
)
from shelfbox.manifest import GitInfo, Item, ItemKind, LinkInfo, Manifest, RepoMeta

REPO_ID = "01JWPQ3VKGE93V9BDHAENVXFA5"
STORE_DIR = "myapp-01JTAR00000000000000000000"


def _item(path):
    return Item(
        path=path,
        store_path=f"items/{path}",
        kind=ItemKind.FILE,
        link=LinkInfo(),
        git=GitInfo(was_tracked=False),
        created_at="2026-04-29T00:00:00Z",
        updated_at="2026-04-29T00:00:00Z",
    )


def _setup_store(store, root, names):
    """Register one repo with shelved files linked from ``root``."""
    idx = Index()
    idx.upsert(
        REPO_ID,
        RepoEntry(
            root=root,
            git_dir=root / ".git",
            git_common_dir=root / ".git",
            store_dir=STORE_DIR,
            last_seen_at="2026-04-29T00:00:00Z",
        ),
    )
    index_mod.save(store, idx)
    repo_store = store / "repos" / STORE_DIR
    mf = Manifest(RepoMeta(id=REPO_ID, name="myapp"))
    for name in names:
        mf.add(_item(name))
        store_file = repo_store / "items" / name
        store_file.parent.mkdir(parents=True, exist_ok=True)
        store_file.write_text(name)
        if root.exists():
            (root / name).symlink_to(store_file)
    manifest_mod.save(repo_store, mf)
    return repo_store


def test_human_bytes_units():
    assert human_bytes(0) == "0 B"
    assert human_bytes(1023).endswith(" B")
    assert human_bytes(1024) == "1.0 KiB"
    assert human_bytes(1024 * 1024).endswith(" MiB")
    assert human_bytes(1024 ** 3) == "1.0 GiB"


def test_dir_size_sums_nested_files(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"hello")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.txt").write_bytes(b"world!!")
    assert dir_size(tmp_path) == len(b"hello") + len(b"world!!")


def test_dir_size_of_missing_directory_is_zero(tmp_path):
    assert dir_size(tmp_path / "missing") == 0


def test_store_info_counts_repos_and_items(tmp_path):
    store = tmp_path / "store"
    root = tmp_path / "repo"
    root.mkdir()
    _setup_store(store, root, ["a.txt", "b.txt"])
    summary = store_info(store)
    assert summary.repo_count == 1
    assert summary.total_items == 2
    assert summary.disk_bytes == dir_size(store)
    assert summary.store == store


def test_store_info_empty_store(tmp_path):
    summary = store_info(tmp_path)
    assert (summary.repo_count, summary.total_items) == (0, 0)


def test_verify_healthy_store_has_no_issues(tmp_path):
    store = tmp_path / "store"
    root = tmp_path / "repo"
    root.mkdir()
    _setup_store(store, root, ["secret.env"])
    assert verify(store) == []


def test_verify_reports_missing_store_file(tmp_path):
    store = tmp_path / "store"
    root = tmp_path / "repo"
    root.mkdir()
    repo_store = _setup_store(store, root, ["secret.env"])
    (repo_store / "items" / "secret.env").unlink()
    issues = verify(store)
    # The symlink now dangles as well, so both checks fire.
    assert len(issues) == 2
    assert any(i.startswith("MISS  store file not found:") for i in issues)
    assert any(i.startswith("MISS  symlink not found:") for i in issues)


def test_verify_reports_unreadable_manifest(tmp_path):
    store = tmp_path / "store"
    root = tmp_path / "repo"
    root.mkdir()
    repo_store = _setup_store(store, root, [])
    (repo_store / "manifest.json").unlink()
    issues = verify(store)
    assert len(issues) == 1
    assert issues[0].startswith("WARN  ")


def test_find_stale_lists_missing_roots(tmp_path):
    store = tmp_path / "store"
    root = tmp_path / "gone"
    _setup_store(store, root, [])
    stale = find_stale(store)
    assert stale == [StaleEntry(repo_id=REPO_ID, root=root, store_dir=STORE_DIR)]


def test_find_stale_ignores_existing_roots(tmp_path):
    store = tmp_path / "store"
    root = tmp_path / "repo"
    root.mkdir()
    _setup_store(store, root, [])
    assert find_stale(store) == []


def test_remove_stale_deletes_store_dir_and_index_entry(tmp_path):
    store = tmp_path / "store"
    repo_store = _setup_store(store, tmp_path / "gone", [])
    assert repo_store.exists()
    removed = remove_stale(store, find_stale(store))
    assert [e.repo_id for e in removed] == [REPO_ID]
    assert not repo_store.exists()
    assert index_mod.load(store).get(REPO_ID) is None


def test_remove_stale_tolerates_missing_store_dir(tmp_path):
    store = tmp_path / "store"
    repo_store = _setup_store(store, tmp_path / "gone", [])
    import shutil

    shutil.rmtree(repo_store)
    remove_stale(store, find_stale(store))
    assert len(index_mod.load(store)) == 0


@pytest.mark.parametrize("count", [1, 3])
def test_store_info_counts_many_items(tmp_path, count):
    store = tmp_path / "store"
    root = tmp_path / "repo"
    root.mkdir()
    _setup_store(store, root, [f"f{n}.txt" for n in range(count)])
    assert store_info(store).total_items == count
    assert isinstance(store_info(store).store, Path) and store_info(store).repo_count == 1