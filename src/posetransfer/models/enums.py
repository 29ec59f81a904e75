"""Enumerations used throughout PoseTransfer."""

from enum import StrEnum


class JointId(StrEnum):
    HEAD = "head"
    NECK = "neck"
    L_SHOULDER = "l_shoulder"
    R_SHOULDER = "r_shoulder"
    L_ELBOW = "l_elbow"
    R_ELBOW = "r_elbow"
    L_HAND = "l_hand"
    R_HAND = "r_hand"
    HIP = "hip"
    L_HIP = "l_hip"
    R_HIP = "r_hip"
    L_KNEE = "l_knee"
    R_KNEE = "r_knee"
    L_FOOT = "l_foot"
    R_FOOT = "r_foot"


class PoseMode(StrEnum):
    EDITOR = "editor"
    PRESETS = "presets"
    DRAW = "draw"
