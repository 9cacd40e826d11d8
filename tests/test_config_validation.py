from pathlib import Path

import pytest
from pydantic import ValidationError

from synthid.config import load_config


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


@pytest.mark.parametrize(
    "body",
    [
        "seed:\n  value: -1\n",
        "ids:\n  nanoid_length: 0\n",
        "ids:\n  nanoid_alphabet: ''\n",
        "commerce:\n  price_decimals: 5\n",
        "commerce:\n  price_min: 10.0\n  price_max: 1.0\n",
        "commerce:\n  quantity_min: 9\n  quantity_max: 2\n",
        "logging:\n  level: LOUD\n",
    ],
)
def test_out_of_range_values(tmp_path: Path, body: str) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text(body)
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})
