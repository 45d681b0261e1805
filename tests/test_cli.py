"""Tests for the command line entry point."""

import argparse

import cv2
import numpy as np
import pytest

from main import build_parser, build_mask, parse_coefficient, run_cli


def test_parse_coefficient():
    assert parse_coefficient("2,3") == (2, 3)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coefficient("2")


def test_build_mask_low_pass_and_drop():
    args = build_parser().parse_args(["--size", "4", "--low-pass", "2", "--drop", "0,1"])
    mask = build_mask(args, 4)
    assert mask.retained_count() == 3
    assert not mask.get(0, 1)
    assert mask.get(1, 1)


def test_build_mask_keep():
    args = build_parser().parse_args(["--keep", "0,0", "1,2"])
    mask = build_mask(args, 4)
    assert mask.retained_count() == 2
    assert mask.get(1, 2)


def test_run_sample_writes_outputs(tmp_path, capsys):
    output = tmp_path / "out.png"
    components = tmp_path / "components.png"
    compare = tmp_path / "compare.png"
    code = run_cli([
        "--sample", "gradient", "--size", "4", "--low-pass", "2",
        "--output", str(output),
        "--components", str(components),
        "--compare", str(compare),
    ])
    assert code == 0
    assert output.exists()
    assert components.exists()
    assert compare.exists()
    saved = cv2.imread(str(output), cv2.IMREAD_GRAYSCALE)
    assert saved.shape == (256, 256)
    assert "Retained:   4/16" in capsys.readouterr().out


def test_run_image_file(tmp_path):
    source = tmp_path / "in.png"
    cv2.imwrite(str(source), np.full((10, 12), 200, dtype=np.uint8))
    output = tmp_path / "out.png"
    assert run_cli([str(source), "--size", "4", "--output", str(output)]) == 0
    saved = cv2.imread(str(output), cv2.IMREAD_GRAYSCALE)
    assert saved.shape == (10, 12)
    assert saved[0, 0] == 200


def test_run_invalid_size(capsys):
    assert run_cli(["--size", "40"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_run_out_of_range_coefficient(capsys):
    assert run_cli(["--size", "2", "--drop", "5,5"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_run_writes_mosaic(tmp_path):
    mosaic = tmp_path / "mosaic.png"
    assert run_cli(["--sample", "rings", "--size", "3", "--mosaic", str(mosaic)]) == 0
    saved = cv2.imread(str(mosaic), cv2.IMREAD_GRAYSCALE)
    assert saved.shape == (13, 13)
    # DC preview is black, grid lines are white
    assert saved[1:4, 1:4].max() == 0
    assert saved[0, 0] == 255
