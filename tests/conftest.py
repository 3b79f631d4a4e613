# tests/conftest.py
"""Shared fixtures: a scene adapter that records every call instead of drawing."""

import numpy as np
import pytest

from globe_graph.scene import SelectionEvent


class RecordingAdapter:
    """SceneAdapter fake: primitives are plain dicts, calls are logged."""

    def __init__(self):
        self.calls = []
        self.frame_callbacks = []
        self.select_callbacks = []
        self.info = None

    def create_scene(self):
        self.calls.append('create_scene')
        return {'children': []}

    def create_camera(self):
        self.calls.append('create_camera')
        return {'updates': 0}

    def add_to_scene(self, scene, primitive):
        scene['children'].append(primitive)

    def create_sphere_mesh(self, radius, position, color=None):
        return {'kind': 'sphere', 'radius': radius, 'position': tuple(position), 'color': color}

    def create_polyline_from_points(self, points, color="red", width=2):
        return {'kind': 'line', 'points': np.asarray(points), 'color': color, 'width': width}

    def look_at(self, primitive, target):
        primitive['look_at'] = tuple(target)
        return primitive

    def face_camera(self, primitive, camera):
        primitive['faced'] = primitive.get('faced', 0) + 1

    def update_controls(self, camera):
        self.calls.append('update_controls')
        camera['updates'] += 1

    def render_frame(self, scene, camera):
        self.calls.append('render_frame')
        return scene

    def display_info(self, scene, text):
        self.calls.append('display_info')
        self.info = text

    def on_frame(self, callback):
        self.frame_callbacks.append(callback)

    def on_select(self, callback):
        self.select_callbacks.append(callback)

    # test helpers
    def run(self, frames=1):
        for _ in range(frames):
            for callback in self.frame_callbacks:
                callback()

    def select(self, object_id):
        for callback in self.select_callbacks:
            callback(SelectionEvent(object_id))

    def primitives(self, scene, kind):
        return [p for p in scene['children'] if p['kind'] == kind]


@pytest.fixture
def adapter():
    return RecordingAdapter()
