from __future__ import annotations

import numpy as np

from wavemix.utils.hashing import canonical_dumps, sha256_hex_canonical_json, sha256_hex_samples
from wavemix.utils.quantize import quantize, quantize_list


def test_canonical_dumps_is_deterministic():
    obj = {"b": 1, "a": 2, "nested": {"z": 1, "y": 2}}
    assert canonical_dumps(obj) == '{"a":2,"b":1,"nested":{"y":2,"z":1}}'


def test_sha256_hex_canonical_json_matches_order():
    assert sha256_hex_canonical_json({"b": 1, "a": 2}) == sha256_hex_canonical_json({"a": 2, "b": 1})


def test_sha256_hex_samples_ignores_input_dtype():
    x = np.array([0.5, -0.25, 1.0])
    assert sha256_hex_samples(x) == sha256_hex_samples(x.astype(np.float32))
    assert sha256_hex_samples(x) != sha256_hex_samples(x[::-1])


def test_quantize_rounding():
    assert quantize(1.234, 0.01) == 1.23
    assert quantize(1.235, 0.01) == 1.24
    assert quantize(-1.235, 0.01) == -1.24
    assert quantize(-0.001, 0.01) == 0.0
    assert np.isnan(quantize(float("nan"), 0.01))


def test_quantize_list():
    assert quantize_list([0.004, 0.005, 0.006], 0.01) == [0.0, 0.01, 0.01]
