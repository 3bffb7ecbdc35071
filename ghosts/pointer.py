import pygame

from .log import get_logger
from .scene import PointerMoved, Resized

log = get_logger(__name__)

INDEX_TIP = 8


class EventTranslator:
    """Turns pygame events into scene messages.

    Touch follows the first finger put down; other fingers are ignored until it
    lifts. Resize notifications arrive twice in pygame 2 (VIDEORESIZE and
    WINDOWSIZECHANGED), so a Resized is only emitted when the size changes.
    """

    def __init__(self, width, height):
        self.size = (int(width), int(height))
        self.primary_finger = None

    def translate(self, event):
        if event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            return PointerMoved(x, y)

        if event.type == pygame.FINGERDOWN:
            if self.primary_finger is None:
                self.primary_finger = event.finger_id
            return None

        if event.type == pygame.FINGERUP:
            if event.finger_id == self.primary_finger:
                self.primary_finger = None
            return None

        if event.type == pygame.FINGERMOTION:
            if self.primary_finger is None:
                self.primary_finger = event.finger_id
            if event.finger_id != self.primary_finger:
                return None
            w, h = self.size
            return PointerMoved(event.x * w, event.y * h)

        if event.type == pygame.VIDEORESIZE:
            return self._resized(event.w, event.h)

        if event.type == pygame.WINDOWSIZECHANGED:
            return self._resized(event.x, event.y)

        return None

    def _resized(self, w, h):
        size = (int(w), int(h))
        if size == self.size:
            return None
        self.size = size
        return Resized(*size)


class HandPointer:
    """Index fingertip from the webcam as a pointer, mirrored like a selfie view."""

    def __init__(self, camera_index=0, width=None, height=None):
        # optional stack: raises ImportError when opencv/mediapipe are not installed
        import cv2
        import mediapipe as mp

        self._cv2 = cv2
        self.cap = cv2.VideoCapture(camera_index)
        if not self.cap.isOpened():
            log.warning('camera %s could not be opened; the fingertip pointer will stay idle', camera_index)
        if width and height:
            self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
            self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
        self.hands = mp.solutions.hands.Hands(
            model_complexity=0,
            max_num_hands=1,
            min_detection_confidence=0.5,
            min_tracking_confidence=0.5,
        )
        log.info('hand tracking on camera %s', camera_index)

    def read(self, width, height):
        ret, frame = self.cap.read()
        if not ret:
            return None
        frame_rgb = self._cv2.cvtColor(frame, self._cv2.COLOR_BGR2RGB)
        result = self.hands.process(frame_rgb)
        if not (result and result.multi_hand_landmarks):
            return None
        return landmark_to_screen(result.multi_hand_landmarks[0].landmark[INDEX_TIP], width, height)

    def poll(self, width, height):
        pos = self.read(width, height)
        if pos is None:
            return None
        return PointerMoved(*pos)

    def close(self):
        self.cap.release()
        self.hands.close()


def landmark_to_screen(lm, width, height):
    # camera image is mirrored so moving the hand right moves the pointer right
    return (width - int(lm.x * width), int(lm.y * height))
