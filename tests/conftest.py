from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def warehouse_payload() -> dict[str, Any]:
    return {
        "info": {"name": "demo", "version": "1.1.0", "requires_dist": None},
        "last_serial": 42,
        "releases": {
            "1.0.0": [
                {
                    "comment_text": "",
                    "digests": {"md5": "a" * 32, "sha256": "b" * 64},
                    "filename": "demo-1.0.0.tar.gz",
                    "has_sig": False,
                    "md5_digest": "a" * 32,
                    "packagetype": "sdist",
                    "python_version": "source",
                    "requires_python": None,
                    "url": "https://files.example.org/packages/demo-1.0.0.tar.gz",
                    "yanked": False,
                },
            ],
            "1.1.0": [
                {
                    "has_sig": True,
                    "md5_digest": "c" * 32,
                    "packagetype": "bdist_wheel",
                    "python_version": "py3",
                    "requires_python": ">=3.8",
                    "url": "https://files.example.org/packages/demo-1.1.0-py3-none-any.whl",
                },
                {
                    "has_sig": False,
                    "md5_digest": "d" * 32,
                    "packagetype": "sdist",
                    "python_version": "source",
                    "url": "https://files.example.org/packages/demo-1.1.0.tar.gz",
                },
            ],
            "2.0.0": [],
        },
        "urls": [],
    }
