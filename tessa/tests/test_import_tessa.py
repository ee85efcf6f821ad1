"""Smoke test to ensure the top-level package import works and exposes the
flat API layer (`tessa/__init__.py`).
"""

def test_import_tessa_smoke():
    import tessa
    assert hasattr(tessa, 'segment_intersection')
    assert hasattr(tessa, 'segment_intersection_int')
    assert hasattr(tessa, 'directed_angle')
    assert tessa.intersection.segment_intersection is tessa.segment_intersection
    assert set(tessa.__all__) <= set(dir(tessa))
