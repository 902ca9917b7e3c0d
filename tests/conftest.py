"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample SVGs shaped like oslllo-svg-fixer output

LINE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <path d="M12,12 L0,0"/>
</svg>'''

NO_VIEWBOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <path d="M2 2L22 22"/>
</svg>'''

NO_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

WIDE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 48 24">
  <path fill="#000" d="M4 4h40v16H4z"/>
  <path fill="#000" d="M10 8L38 8L24 18Z"/>
</svg>'''

ARC_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M2,12 A10,10 0 1,0 22,12"/>
</svg>'''

ARROW_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <path d="M20 11H7.83l5.59-5.59L12 4l-8 8 8 8 1.41-1.41L7.83 13H20v-2z" fill="#000000"/>
</svg>'''

VECTOR_DRAWABLE_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="24dp"
    android:height="24dp"
    android:viewportWidth="24"
    android:viewportHeight="24">
    <path
        android:fillColor="#000000"
        android:pathData="M20 11H7.83l5.59-5.59L12 4l-8 8 8 8 1.41-1.41L7.83 13H20v-2z"/>
    <path
        android:fillColor="#FF112233"
        android:strokeColor="#FF0000"
        android:pathData="M0 0h24v24H0z"/>
</vector>'''


@pytest.fixture
def line_svg() -> str:
    return LINE_SVG


@pytest.fixture
def arrow_svg() -> str:
    return ARROW_SVG


@pytest.fixture
def wide_svg() -> str:
    return WIDE_SVG
