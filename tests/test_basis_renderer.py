"""Tests for basis image previews."""

import numpy as np
import pytest

from engines.basis_matrix import create_dct_matrix
from engines.basis_renderer import (
    component_pattern,
    normalize_pattern,
    render_component,
    render_all_components,
    component_mosaic,
)
from engines.reconstructor import reconstruct
from models.coefficient_mask import CoefficientMask
from models.errors import DimensionMismatchError


@pytest.mark.parametrize("N", [1, 2, 4, 8, 32])
def test_dc_component_is_black(N):
    preview = render_component(0, 0, N)
    assert preview.shape == (N, N)
    assert np.array_equal(preview, np.zeros((N, N)))
    assert not np.isnan(preview).any()


def test_dc_pattern_is_constant_256():
    pattern = component_pattern(0, 0, create_dct_matrix(4))
    assert np.allclose(pattern, 256.0)


@pytest.mark.parametrize("N", [2, 3, 4, 8])
def test_ac_components_span_unit_range(N):
    components = render_all_components(N)
    for row in range(N):
        for col in range(N):
            if (row, col) == (0, 0):
                continue
            preview = components[row, col]
            assert np.isclose(preview.min(), 0.0)
            assert np.isclose(preview.max(), 1.0)


def test_render_all_matches_single():
    C = create_dct_matrix(4)
    components = render_all_components(4, C)
    assert components.shape == (4, 4, 4, 4)
    assert np.array_equal(components[2, 1], render_component(2, 1, 4, C))


def test_row_index_is_vertical_frequency():
    """(1, 0) varies top-to-bottom only; (0, 1) varies left-to-right only."""
    vertical = render_component(1, 0, 4)
    horizontal = render_component(0, 1, 4)
    assert np.allclose(vertical, vertical[:, :1])
    assert np.allclose(horizontal, horizontal[:1, :])
    assert np.allclose(vertical, horizontal.T)


def test_preview_matches_masked_reconstruction():
    """A preview shows the pattern its mask entry controls."""
    N = 4
    rng = np.random.default_rng(7)
    image = rng.random((N, N))
    coeff = (2, 3)

    all_on = reconstruct(image, N, CoefficientMask.all_on(N))
    without = CoefficientMask.all_on(N)
    without.set(*coeff, False)
    difference = all_on - reconstruct(image, N, without)

    preview = render_component(*coeff, N)
    normalized = normalize_pattern(difference)
    assert np.allclose(normalized, preview, atol=1e-9) or \
        np.allclose(normalized, 1.0 - preview, atol=1e-9)


def test_normalize_flat_pattern():
    assert np.array_equal(normalize_pattern(np.full((3, 3), 7.0)), np.zeros((3, 3)))


def test_normalize_range():
    out = normalize_pattern(np.array([[-2.0, 0.0], [2.0, 6.0]]))
    assert np.allclose(out, [[0.0, 0.25], [0.5, 1.0]])


def test_component_index_out_of_range():
    with pytest.raises(IndexError):
        render_component(4, 0, 4)
    with pytest.raises(IndexError):
        render_component(0, -1, 4)


def test_basis_size_mismatch():
    with pytest.raises(DimensionMismatchError):
        render_component(0, 1, 4, create_dct_matrix(8))


def test_component_mosaic_layout():
    components = render_all_components(3)
    mosaic = component_mosaic(components, gap=1)
    assert mosaic.shape == (13, 13)
    assert np.array_equal(mosaic[1:4, 5:8], components[0, 1])
    assert np.all(mosaic[0, :] == 1.0)
    assert np.all(mosaic[:, 4] == 1.0)
