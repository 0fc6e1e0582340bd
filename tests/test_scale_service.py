"""Tests for identicon/services/scale_service.py"""

import numpy as np
import pytest

from identicon.models.errors import InvalidConfiguration, InvalidDimension
from identicon.services.scale_service import ScaleService


def checkerboard(size):
    base = np.zeros((size, size, 4), dtype=np.uint8)
    for y in range(size):
        for x in range(size):
            base[y, x] = (y * 25, x * 25, (x + y) % 2 * 255, 255)
    return base


class TestScale:

    def test_output_shape(self):
        assert ScaleService().scale(checkerboard(5), 100).shape == (100, 100, 4)

    def test_block_structure_preserved(self):
        base = checkerboard(5)
        out = ScaleService().scale(base, 100)
        for j in range(5):
            for i in range(5):
                assert (out[100 * j // 5, 100 * i // 5] == base[j, i]).all()

    def test_integer_ratio_gives_uniform_blocks(self):
        base = checkerboard(5)
        out = ScaleService().scale(base, 100)
        for j in range(5):
            for i in range(5):
                block = out[j * 20:(j + 1) * 20, i * 20:(i + 1) * 20]
                assert (block == base[j, i]).all()

    def test_non_integer_ratio_only_copies_source_pixels(self):
        base = checkerboard(7)
        out = ScaleService().scale(base, 64)
        sources = {tuple(px) for px in base.reshape(-1, 4)}
        assert {tuple(px) for px in out.reshape(-1, 4)} <= sources
        assert (out[0, 0] == base[0, 0]).all()
        assert (out[-1, -1] == base[-1, -1]).all()

    def test_downscale_is_legal(self):
        base = checkerboard(9)
        out = ScaleService().scale(base, 3)
        assert out.shape == (3, 3, 4)
        # центры блоков 3x3: строки и столбцы 1, 4, 7
        assert (out == base[1::3, 1::3]).all()

    def test_identity(self):
        base = checkerboard(5)
        assert (ScaleService().scale(base, 5) == base).all()

    @pytest.mark.parametrize("dimension", [0, -10])
    def test_invalid_dimension(self, dimension):
        with pytest.raises(InvalidDimension):
            ScaleService().scale(checkerboard(5), dimension)

    def test_invalid_dimension_is_configuration_error(self):
        with pytest.raises(InvalidConfiguration):
            ScaleService().scale(checkerboard(5), 0)
