"""
Tests for widths, settings and formatting helpers.
"""

import numpy as np
import pytest

from primewheel.config import Settings, load_settings
from primewheel.errors import IntegerOverflow
from primewheel.formatting import factorization_string, simple_array_description
from primewheel.widths import width_for


class TestWidths:

    def test_int64_ceilings(self):
        w = width_for('int64')
        assert w.max == 2**63 - 1
        assert w.min == -(2**63)
        assert w.max_divisor == 3037000499

    @pytest.mark.parametrize("dtype", ['int32', np.int32, np.dtype('int32')])
    def test_resolves_dtype_forms(self, dtype):
        assert width_for(dtype).name == 'int32'

    @pytest.mark.parametrize("dtype", ['uint64', 'float64', 'bogus'])
    def test_rejects_unsupported(self, dtype):
        with pytest.raises(ValueError):
            width_for(dtype)

    def test_coerce(self):
        w = width_for('int8')
        assert w.coerce(np.int64(100)) == 100
        with pytest.raises(IntegerOverflow):
            w.coerce(-129)
        with pytest.raises(TypeError):
            w.coerce("5")


class TestSettings:

    def test_defaults(self):
        s = Settings()
        assert s.max_span == 1_000_000
        assert s.cache_capacity == 10_000
        assert s.num_workers is None
        assert s.width == 'int64'

    def test_default_file(self):
        assert load_settings() == Settings()

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("max_span: 500\ncache_capacity: 20\nnum_workers: 2\nwidth: int32\n")
        s = load_settings(path)
        assert s == Settings(max_span=500, cache_capacity=20, num_workers=2, width='int32')

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_settings(path) == Settings()

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("max_spam: 10\n")
        with pytest.raises(ValueError, match="unknown settings"):
            load_settings(path)

    @pytest.mark.parametrize("kwargs", [
        {"max_span": -1},
        {"cache_capacity": 0},
        {"num_workers": 0},
        {"width": "uint8"},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            Settings(**kwargs)


class TestFormatting:

    def test_simple_array_description(self):
        assert simple_array_description([2, 2, 3, 3, 3, 5]) == "[2, 2, 3, 3, 3, 5]"
        assert simple_array_description([]) == "[]"

    def test_factorization_string(self):
        assert factorization_string([2, 2, 3, 3, 3, 5]) == "2^2 × 3^3 × 5"
        assert factorization_string([7]) == "7"
        assert factorization_string([]) == "1"

    def test_accepts_numpy_arrays(self):
        arr = np.array([2, 2, 5], dtype=np.int64)
        assert simple_array_description(arr) == "[2, 2, 5]"
        assert factorization_string(arr) == "2^2 × 5"
