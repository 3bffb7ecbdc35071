import argparse
import logging
import random
import sys
from dataclasses import replace

from .config import load_settings, save_settings
from .log import configure_logging, get_logger
from .scene import Resized, Scene
from .surface import PygameSurface, RecordingSurface

log = get_logger(__name__)

HEADLESS_FRAMES = 600


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog='ghosts', description='Ghosts whose eyes follow the pointer.')
    p.add_argument('--config', help='JSON settings file (default: $GHOSTS_CONFIG)')
    p.add_argument('--width', type=int)
    p.add_argument('--height', type=int)
    p.add_argument('--fps', type=int)
    p.add_argument('--seed', type=int)
    p.add_argument('--fullscreen', action='store_true', default=None)
    p.add_argument('--hands', dest='hand_tracking', action='store_true', default=None,
                   help='follow the index fingertip seen by the webcam (needs opencv + mediapipe)')
    p.add_argument('--camera', dest='camera_index', type=int)
    p.add_argument('--frames', type=int, help='stop after this many frames')
    p.add_argument('--headless', action='store_true', help='run without a window against a recording surface')
    p.add_argument('--save-config', metavar='PATH', help='write the effective settings to PATH and exit')
    p.add_argument('--debug', action='store_true')
    return p.parse_args(argv)


def make_scene(settings, surface):
    scene = Scene(settings.width, settings.height, surface, random.Random(settings.seed))
    scene.initialize_ghosts()
    return scene


def run_headless(settings, frames=HEADLESS_FRAMES, surface=None):
    surface = surface if surface is not None else RecordingSurface(keep_last_frame=True)
    scene = make_scene(settings, surface)
    for _ in range(frames):
        scene.tick()
    log.info('ran %d headless frames with %d ghosts', scene.frames, len(scene.ghosts))
    return scene


def open_hand_pointer(settings, width, height):
    from .pointer import HandPointer
    try:
        return HandPointer(settings.camera_index, width, height)
    except ImportError as e:
        log.warning('hand tracking unavailable (%s); install the "hands" extra. Using the mouse only.', e)
        return None
    except Exception:
        # camera or mediapipe setup failed at runtime; keep the mouse
        log.exception('could not start hand tracking, using the mouse only')
        return None


def run(settings, frames=None):
    import pygame
    from .pointer import EventTranslator

    pygame.init()
    flags = 0
    size = (settings.width, settings.height)
    if settings.fullscreen:
        flags |= pygame.FULLSCREEN
        size = (0, 0)
    elif settings.resizable:
        flags |= pygame.RESIZABLE
    screen = pygame.display.set_mode(size, flags)
    pygame.display.set_caption(settings.caption)
    clock = pygame.time.Clock()

    width, height = screen.get_size()
    settings = replace(settings, width=width, height=height)
    surface = PygameSurface(screen, settings.background)
    scene = make_scene(settings, surface)
    translator = EventTranslator(width, height)
    hand = None

    running = True
    try:
        if settings.hand_tracking:
            hand = open_hand_pointer(settings, width, height)
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    message = translator.translate(event)
                    if message is not None:
                        scene.post(message)
                        if isinstance(message, Resized):
                            surface.target = pygame.display.get_surface()
            if hand is not None:
                message = hand.poll(scene.width, scene.height)
                if message is not None:
                    scene.post(message)

            scene.tick()
            pygame.display.flip()
            clock.tick(settings.fps)

            if frames is not None and scene.frames >= frames:
                running = False
    finally:
        if hand is not None:
            hand.close()
        if surface.skipped:
            log.debug('skipped %d non-finite circles', surface.skipped)
        pygame.quit()
    return scene


def main(argv=None):
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.debug else None)
    overrides = {k: getattr(args, k) for k in ('width', 'height', 'fps', 'seed', 'fullscreen', 'hand_tracking', 'camera_index')}
    settings = load_settings(args.config, overrides)

    if args.save_config:
        save_settings(settings, args.save_config)
        log.info('saved settings to %s', args.save_config)
        return 0

    if args.headless:
        run_headless(settings, args.frames or HEADLESS_FRAMES)
    else:
        run(settings, args.frames)
    return 0


if __name__ == '__main__':
    sys.exit(main())
