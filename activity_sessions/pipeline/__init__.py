"""Sessionization stages: normalize, group, segment, aggregate."""
