"""Pytest fixtures for test configuration."""
import pytest
from pathlib import Path
from typing import Dict, Any


@pytest.fixture
def test_config(tmp_path: Path) -> Dict[str, Any]:
    """Provide a minimal test configuration as a dict.

    Tests should use this fixture and pass cfg to CLI/modules directly,
    rather than creating .env files or setting environment variables.

    Output paths are isolated to tmp_path.
    """
    return {
        'log_level': 'DEBUG',
        'scan': {
            'extensions': [],
            'output': str(tmp_path / 'scan_result.txt'),
            'ignore_patterns': [],
            'follow_symlinks': False,
        },
        'rank': {
            'top_k': 20,
            'min_pattern_length': 3,
            'matcher_kind': 'path',
            'workers': 1,
            'timeout': 0,
            'output': None,
        },
        'logging': {
            'progress_enabled': False,
            'progress_interval': 1000,
        },
    }


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Small directory tree:

        tree/
          .hidden.py
          a.py
          b.txt
          sub/
            c.py
            deeper/
              d.PY
    """
    root = tmp_path / 'tree'
    (root / 'sub' / 'deeper').mkdir(parents=True)
    (root / '.hidden.py').write_text('')
    (root / 'a.py').write_text('')
    (root / 'b.txt').write_text('')
    (root / 'sub' / 'c.py').write_text('')
    (root / 'sub' / 'deeper' / 'd.PY').write_text('')
    return root
