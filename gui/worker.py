"""Background workers for reconstruction and basis previews."""

import numpy as np
from PySide6.QtCore import QObject, Signal

from models.coefficient_mask import CoefficientMask
from engines.reconstructor import reconstruct_with_stats
from engines.basis_renderer import render_all_components


class RequestTracker:
    """
    Hands out increasing request ids; only the newest one is current.

    A caller starts a worker with ``next_id()`` and, when it finishes,
    drops the result unless ``is_current(request_id)``.
    """

    def __init__(self):
        self._latest = 0

    def next_id(self) -> int:
        self._latest += 1
        return self._latest

    @property
    def latest(self) -> int:
        return self._latest

    def is_current(self, request_id: int) -> bool:
        return request_id == self._latest


class ReconstructionWorker(QObject):
    """Runs a masked reconstruction pass in a background thread.

    The image and mask are copied on construction, so later edits by the
    caller cannot reach a pass that is already running.
    """

    finished = Signal(int, object)
    error = Signal(int, str)
    progress = Signal(str)

    def __init__(self, request_id: int, image: np.ndarray, block_size: int,
                 mask: CoefficientMask, basis: np.ndarray = None):
        super().__init__()
        self.request_id = request_id
        self.image = np.array(image, copy=True)
        self.block_size = block_size
        self.mask = mask.copy()
        self.basis = basis

    def run(self):
        try:
            h, w = self.image.shape[:2]
            self.progress.emit(f"Reconstructing ({w}×{h}, N={self.block_size})...")
            result = reconstruct_with_stats(self.image, self.block_size, self.mask, self.basis)
            self.finished.emit(self.request_id, result)
        except Exception as e:
            self.error.emit(self.request_id, str(e))


class ComponentWorker(QObject):
    """Renders the N*N basis previews in a background thread."""

    finished = Signal(int, object)
    error = Signal(int, str)
    progress = Signal(str)

    def __init__(self, request_id: int, block_size: int, basis: np.ndarray = None):
        super().__init__()
        self.request_id = request_id
        self.block_size = block_size
        self.basis = basis

    def run(self):
        try:
            n = self.block_size
            self.progress.emit(f"Rendering {n * n} components...")
            components = render_all_components(n, self.basis)
            self.finished.emit(self.request_id, components)
        except Exception as e:
            self.error.emit(self.request_id, str(e))
