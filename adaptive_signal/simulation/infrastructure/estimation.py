"""
Traffic count estimation from uploaded video by frame differencing.
"""
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Tuple

import cv2
import numpy as np

from ..domain import TrafficEstimate, TrafficEstimator
from ...common.exceptions import ValidationError

logger = logging.getLogger(__name__)


class FrameDifferenceEstimator(TrafficEstimator):
    """
    Counts moving blobs between consecutive frames and splits them by area:
    small blobs are pedestrians, large blobs are vehicles.
    """

    def __init__(
        self,
        diff_threshold: int = 25,
        min_blob_area: float = 20.0,
        vehicle_blob_area: float = 1500.0,
        max_frames: int = 150
    ):
        self.diff_threshold = diff_threshold
        self.min_blob_area = min_blob_area
        self.vehicle_blob_area = vehicle_blob_area
        self.max_frames = max_frames
        self._kernel = np.ones((3, 3), dtype=np.uint8)

    @staticmethod
    def _prepare(frame: np.ndarray) -> np.ndarray:
        if frame.ndim == 3:
            frame = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        return cv2.GaussianBlur(frame, (5, 5), 0)

    def count_motion_blobs(self, previous: np.ndarray, current: np.ndarray) -> Tuple[int, int]:
        """Returns (pedestrians, vehicles) moving between two grayscale frames."""
        diff = cv2.absdiff(previous, current)
        _, mask = cv2.threshold(diff, self.diff_threshold, 255, cv2.THRESH_BINARY)
        mask = cv2.dilate(mask, self._kernel, iterations=2)
        contours, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)

        pedestrians = 0
        vehicles = 0
        for contour in contours:
            area = cv2.contourArea(contour)
            if area < self.min_blob_area:
                continue
            if area < self.vehicle_blob_area:
                pedestrians += 1
            else:
                vehicles += 1
        return pedestrians, vehicles

    def _read_frames(self, path: str) -> List[np.ndarray]:
        cap = cv2.VideoCapture(path)
        frames = []
        try:
            if not cap.isOpened():
                return frames
            while len(frames) < self.max_frames:
                ret, frame = cap.read()
                if not ret:
                    break
                frames.append(self._prepare(frame))
        finally:
            cap.release()
        return frames

    def estimate_frames(self, frames: List[np.ndarray]) -> TrafficEstimate:
        if len(frames) < 2:
            raise ValidationError("Upload must contain at least two decodable frames")

        pedestrian_counts = []
        vehicle_counts = []
        for previous, current in zip(frames, frames[1:]):
            pedestrians, vehicles = self.count_motion_blobs(previous, current)
            pedestrian_counts.append(pedestrians)
            vehicle_counts.append(vehicles)

        return TrafficEstimate(
            estimated_pedestrians=int(round(float(np.mean(pedestrian_counts)))),
            estimated_vehicles=int(round(float(np.mean(vehicle_counts))))
        )

    def estimate(self, payload: bytes, filename: str) -> TrafficEstimate:
        if not payload:
            raise ValidationError("Uploaded file is empty")

        # VideoCapture only reads from a path
        suffix = Path(filename or "").suffix or ".bin"
        fd, path = tempfile.mkstemp(suffix=suffix)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            frames = self._read_frames(path)
        finally:
            os.remove(path)

        logger.info(f"Decoded {len(frames)} frames from {filename}")
        estimate = self.estimate_frames(frames)
        logger.info(
            f"Estimated {estimate.estimated_pedestrians} pedestrians, "
            f"{estimate.estimated_vehicles} vehicles from {filename}"
        )
        return estimate
