import pytest

from chains.pool_mappings import OPTIMISM_POOL_MAPPINGS_FILE, PoolMappingError, load_pool_mappings

def test_bundled_file_loads():
    assert OPTIMISM_POOL_MAPPINGS_FILE.exists()
    mappings = load_pool_mappings()
    assert len(mappings) > 0
    for entry in mappings:
        assert isinstance(entry, tuple)
        assert len(entry) == 3
        assert all(a == a.lower() for a in entry)

def test_custom_file(tmp_path):
    f = tmp_path / "mappings.yaml"
    f.write_text('- ["0xAA00000000000000000000000000000000000001", "0x00000000000000000000000000000000000000bb"]\n')
    assert load_pool_mappings(str(f)) == (
        ("0xaa00000000000000000000000000000000000001", "0x00000000000000000000000000000000000000bb"),
    )

def test_empty_file(tmp_path):
    f = tmp_path / "empty.yaml"
    f.write_text("")
    assert load_pool_mappings(str(f)) == ()

def test_missing_file(tmp_path):
    with pytest.raises(PoolMappingError):
        load_pool_mappings(str(tmp_path / "nope.yaml"))

def test_not_a_list(tmp_path):
    f = tmp_path / "bad.yaml"
    f.write_text("pool: 0x1\n")
    with pytest.raises(PoolMappingError):
        load_pool_mappings(str(f))

def test_entry_not_a_list(tmp_path):
    f = tmp_path / "bad.yaml"
    f.write_text("- 12\n")
    with pytest.raises(PoolMappingError):
        load_pool_mappings(str(f))

def test_bad_yaml(tmp_path):
    f = tmp_path / "bad.yaml"
    f.write_text("- [unclosed\n")
    with pytest.raises(PoolMappingError):
        load_pool_mappings(str(f))
