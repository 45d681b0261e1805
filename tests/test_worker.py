"""Tests for background workers and last-request-wins tracking."""

import numpy as np
import pytest

pytest.importorskip("PySide6")

from gui.worker import RequestTracker, ReconstructionWorker, ComponentWorker
from models.coefficient_mask import CoefficientMask
from models.reconstruction_result import ReconstructionResult
from utils.test_images import generate_sample_image


def test_request_tracker_latest_wins():
    tracker = RequestTracker()
    first = tracker.next_id()
    second = tracker.next_id()
    assert second > first
    assert tracker.latest == second
    assert tracker.is_current(second)
    assert not tracker.is_current(first)


def test_reconstruction_worker_emits_result():
    image = generate_sample_image("gradient", 16)
    received = []
    messages = []
    worker = ReconstructionWorker(3, image, 4, CoefficientMask(4))
    worker.finished.connect(lambda request_id, result: received.append((request_id, result)))
    worker.progress.connect(messages.append)
    worker.run()

    assert len(received) == 1
    request_id, result = received[0]
    assert request_id == 3
    assert isinstance(result, ReconstructionResult)
    assert np.allclose(result.reconstructed_image, image, atol=1e-10)
    assert messages and "N=4" in messages[0]


def test_reconstruction_worker_copies_mask():
    mask = CoefficientMask(4)
    worker = ReconstructionWorker(1, np.zeros((8, 8)), 4, mask)
    mask.set_all(False)
    assert worker.mask.retained_count() == 16


def test_reconstruction_worker_copies_image():
    image = np.full((8, 8), 0.5)
    received = []
    worker = ReconstructionWorker(4, image, 4, CoefficientMask(4))
    worker.finished.connect(lambda request_id, result: received.append(result))
    image[:] = 0.0
    worker.run()
    assert np.allclose(received[0].reconstructed_image, 0.5)


def test_reconstruction_worker_reports_error():
    errors = []
    worker = ReconstructionWorker(5, np.zeros((8, 8)), 4, CoefficientMask(8))
    worker.error.connect(lambda request_id, message: errors.append((request_id, message)))
    worker.run()
    assert len(errors) == 1
    assert errors[0][0] == 5
    assert "does not match" in errors[0][1]


def test_component_worker_emits_previews():
    received = []
    worker = ComponentWorker(2, 3)
    worker.finished.connect(lambda request_id, components: received.append((request_id, components)))
    worker.run()
    assert received[0][0] == 2
    assert received[0][1].shape == (3, 3, 3, 3)


def test_component_worker_invalid_size():
    errors = []
    worker = ComponentWorker(9, 0)
    worker.error.connect(lambda request_id, message: errors.append(request_id))
    worker.run()
    assert errors == [9]
