# particles/viewer.py
import numpy as np
import pygame

from config import WIN_W, WIN_H, FPS, BG_COLOR, PARTICLE_COUNT, HAND_SENTINEL
from gesture.types import GestureState
from gesture.worker import GestureWorker
from logger import get_logger
from particles.camera import PerspectiveCamera
from particles.renderer import ParticleRenderer
from particles.scene import SceneState, switch_template, update_particles
from particles.templates import generate_template

logger = get_logger("Viewer")


def run_viewer():
    pygame.init()
    screen = pygame.display.set_mode((WIN_W, WIN_H))
    pygame.display.set_caption("GestureParticles - MediaPipe Hands")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("Consolas", 18)

    camera = PerspectiveCamera(aspect=WIN_W / WIN_H)
    scene = SceneState.create(PARTICLE_COUNT)
    renderer = ParticleRenderer(camera, WIN_W, WIN_H)

    state = GestureState()
    worker = GestureWorker(state, camera)
    worker.start()
    logger.info(f"GestureWorker started: {worker.is_alive()}")

    # Start screen
    start = True
    while start:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                worker.stop()
                return
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_RETURN:
                    start = False
                if event.key == pygame.K_ESCAPE:
                    worker.stop()
                    return

        screen.fill(BG_COLOR)
        t1 = font.render("GestureParticles", True, (220, 220, 220))
        t2 = font.render("ENTER to start | ESC to quit", True, (200, 200, 200))
        t3 = font.render("Gestures: Point=Next shape | Fist=Blast | Open hand=Glow near finger", True, (180, 180, 180))
        screen.blit(t1, (20, 40))
        screen.blit(t2, (20, 70))
        screen.blit(t3, (20, 100))
        pygame.display.flip()
        clock.tick(30)

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                worker.stop()
                return
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    worker.stop()
                    return
                # keyboard fallback
                if event.key == pygame.K_SPACE:
                    switch_template(scene)
                if event.key == pygame.K_r:
                    generate_template(scene.template, scene.buffers)

        # Consume gesture state
        with worker.lock:
            g_gesture = state.gesture
            g_hand = state.hand_position
            g_switch = state.switch_template
            g_label = state.label
            g_seen = state.hand_seen
            g_cam = state.cam_info
            state.switch_template = False

        if g_switch:
            switch_template(scene)

        scene.gesture = g_gesture
        scene.hand_position = np.asarray(g_hand, dtype=np.float64)
        update_particles(scene)

        # Render
        screen.fill(BG_COLOR)
        renderer.draw(screen, scene.buffers)
        if g_hand != HAND_SENTINEL:
            renderer.draw_hand(screen, g_hand)

        hud1 = font.render(f"Shape: {scene.template}", True, (230, 230, 230))
        hud2 = font.render(f"Gesture: {g_label}", True, (200, 200, 200))
        hud3 = font.render(f"Hand: {'YES' if g_seen else 'NO'} | Size: {scene.buffers.size:.3f}", True, (180, 180, 180))
        hud4 = font.render(f"{g_cam}", True, (120, 120, 120))
        screen.blit(hud1, (8, 6))
        screen.blit(hud2, (8, 28))
        screen.blit(hud3, (8, 50))
        screen.blit(hud4, (8, 72))

        pygame.display.flip()
        clock.tick(FPS)
