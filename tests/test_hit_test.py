"""Tests for joint hit-testing."""

import pytest

from posetransfer.models import JOINT_RADIUS, Joint, JointId, PoseGraph
from posetransfer.pipeline import HIT_TOLERANCE, find_nearest
from posetransfer.poses import all_presets


@pytest.mark.parametrize("preset", all_presets(), ids=lambda p: p.name)
def test_exact_joint_position_hits(preset):
    graph = preset.to_graph()
    for joint in graph.joints:
        assert find_nearest(graph, (joint.x, joint.y)) == joint.id


def test_overlapping_markers_pick_the_closest(standing):
    # l_elbow (108, 120) and l_hip (112, 130) are within one hit radius.
    assert find_nearest(standing, (112, 129)) == JointId.L_HIP
    assert find_nearest(standing, (108, 121)) == JointId.L_ELBOW


def test_far_point_misses(standing):
    assert find_nearest(standing, (5, 275)) is None


def test_radius_is_joint_radius_plus_tolerance():
    graph = PoseGraph()
    head = graph.get("head")
    radius = JOINT_RADIUS + HIT_TOLERANCE
    assert find_nearest(graph, (head.x + radius - 0.01, head.y)) == JointId.HEAD
    assert find_nearest(graph, (head.x + radius, head.y)) is None


def test_equal_distance_goes_to_first_joint():
    graph = PoseGraph()
    graph.set_position("neck", 130, 40)  # right next to the head
    assert find_nearest(graph, (129, 40)) == JointId.HEAD

    reordered = PoseGraph(joints=[graph.get("neck"), *[j for j in graph.joints if j.id != "neck"]])
    assert find_nearest(reordered, (129, 40)) == JointId.NECK


def test_custom_radius():
    graph = PoseGraph()
    head = graph.get("head")
    assert find_nearest(graph, (head.x + 20, head.y), radius=25) == JointId.HEAD
    assert find_nearest(graph, (head.x + 2, head.y), radius=1) is None


def test_hit_test_has_no_side_effects(standing):
    before = standing.model_dump()
    find_nearest(standing, (128, 40))
    assert standing.model_dump() == before


@pytest.mark.parametrize("offset", [(0, 12.9), (12.9, 0), (-9, -9)])
def test_within_radius_any_direction(offset):
    graph = PoseGraph(joints=[Joint(id=j.id, x=j.x, y=j.y) for j in PoseGraph().joints])
    hand = graph.get("l_hand")
    assert find_nearest(graph, (hand.x + offset[0], hand.y + offset[1])) == JointId.L_HAND
