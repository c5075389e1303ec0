from pathlib import Path
import textwrap
from prm.config import load_config, load_typed_config, deep_merge, coerce_scalar


def test_deep_merge_simple():
    a = {'a': 1, 'b': {'x': 1, 'y': 2}}
    b = {'b': {'y': 99, 'z': 5}, 'c': 3}
    merged = deep_merge(a, b)
    assert merged['a'] == 1
    assert merged['b']['x'] == 1
    assert merged['b']['y'] == 99
    assert merged['b']['z'] == 5
    assert merged['c'] == 3


def test_coerce_scalar():
    assert coerce_scalar('true') is True
    assert coerce_scalar('False') is False
    assert coerce_scalar('none') is None
    assert coerce_scalar('10') == 10
    assert coerce_scalar('1') == 1
    assert coerce_scalar('-3') == -3
    assert isinstance(coerce_scalar('10.5'), float)
    assert coerce_scalar('[".py", ".pyi"]') == ['.py', '.pyi']
    assert coerce_scalar('foo') == 'foo'


def test_defaults():
    cfg = load_config()
    assert cfg['rank']['top_k'] == 20
    assert cfg['rank']['min_pattern_length'] == 3
    assert cfg['scan']['output'] == 'scan_result.txt'


def test_env_override(monkeypatch):
    monkeypatch.setenv('PRM__RANK__TOP_K', '5')
    monkeypatch.setenv('PRM__RANK__WORKERS', '1')
    monkeypatch.setenv('PRM__SCAN__EXTENSIONS', '[".py"]')
    cfg = load_config()
    assert cfg['rank']['top_k'] == 5
    assert cfg['rank']['workers'] == 1
    assert cfg['rank']['workers'] is not True
    assert cfg['scan']['extensions'] == ['.py']


def test_load_config_dotenv_and_env(tmp_path: Path, monkeypatch):
    """Test that .env file is loaded and environment variables override it."""
    env_file = tmp_path / '.env'
    env_file.write_text(textwrap.dedent('''\
    # comment line
    PRM__SCAN__OUTPUT=custom/list.txt  # inline comment
    PRM__RANK__TOP_K=7
    PRM__RANK__MATCHER_KIND="path"
    '''), encoding='utf-8')
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('PRM_ENABLE_DOTENV', '1')
    monkeypatch.setenv('PRM__RANK__TOP_K', '9')
    cfg = load_config()
    assert cfg['scan']['output'] == 'custom/list.txt'
    assert cfg['rank']['matcher_kind'] == 'path'
    assert cfg['rank']['top_k'] == 9


def test_dotenv_skipped_under_pytest(tmp_path: Path, monkeypatch):
    (tmp_path / '.env').write_text('PRM__RANK__TOP_K=7\n', encoding='utf-8')
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('PRM_ENABLE_DOTENV', raising=False)
    cfg = load_config()
    assert cfg['rank']['top_k'] == 20


def test_overrides_applied_last(monkeypatch):
    monkeypatch.setenv('PRM__RANK__TOP_K', '5')
    cfg = load_config({'rank': {'top_k': 3}})
    assert cfg['rank']['top_k'] == 3
    assert cfg['rank']['workers'] == 1


def test_load_typed_config():
    typed = load_typed_config({'log_level': 'WARNING', 'rank': {'workers': 2}})
    assert typed.log_level == 'WARNING'
    assert typed.rank.workers == 2
