"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample SVGs in the shapes real icon exports use

SIMPLE_PATH_SVG = '''<svg viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">
  <path d="M10 10 L20 20" stroke="#FF0000" stroke-width="2"/>
</svg>'''

ARROW_RIGHT_SVG = '''<svg width="14" height="17" viewBox="0 0 14 17" fill="none" xmlns="http://www.w3.org/2000/svg">
  <path id="Vector" d="M1 1L12 8.5L1 16" stroke="var(--stroke-0, #D1D1D6)" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"/>
</svg>'''

ORDER_CANCEL_SVG = '''<svg width="24" height="22" viewBox="0 0 24 22" fill="none" xmlns="http://www.w3.org/2000/svg">
  <g id="ic_order_cancel">
    <path id="Vector" fill-rule="evenodd" d="M12 0C5.4 0 0 4.9 0 11s5.4 11 12 11 12-4.9 12-11S18.6 0 12 0z" fill="var(--fill-0, #C12031)"/>
    <rect x="7" y="10" width="10" height="2" fill="white"/>
  </g>
</svg>'''

CONNECTION_ERROR_SVG = '''<svg width="479" height="483" viewBox="0 0 479 483" fill="none" xmlns="http://www.w3.org/2000/svg">
  <g style="opacity:0.9">
    <circle cx="239.5" cy="241.5" r="200" fill="#F2F2F7" fill-opacity="0.5"/>
    <polygon points="200,150 280,150 240,220" fill="#8E8E93"/>
  </g>
  <line x1="100" y1="400" x2="380" y2="400" stroke="#C7C7CC" stroke-width="4"/>
  <text x="10" y="20">offline</text>
</svg>'''

GROUPED_SVG = '''<svg viewBox="0 0 48 48" xmlns="http://www.w3.org/2000/svg">
  <g style="fill:#112233;stroke:#445566">
    <g style="stroke:#778899">
      <rect x="0" y="0" width="10" height="10" style="fill:#AABBCC"/>
    </g>
    <circle cx="24" cy="24" r="4"/>
  </g>
  <path d="M0 0h48"/>
</svg>'''

HIDDEN_SVG = '''<svg viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">
  <g display="none">
    <path d="M0 0h10"/>
    <g><rect width="4" height="4"/></g>
  </g>
  <g style="display:none">
    <circle cx="5" cy="5" r="2"/>
  </g>
  <path d="M1 1h2" style="display:none"/>
  <path d="M2 2h2"/>
</svg>'''

NO_VIEWBOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <path d="M10 10"/>
</svg>'''

MULTIPLE_ROOTS_SVG = '''<root>
  <svg viewBox="0 0 24 24"><path d="M0 0h1"/></svg>
  <svg viewBox="0 0 24 24"><path d="M0 0h1"/></svg>
</root>'''


@pytest.fixture
def simple_path_svg() -> str:
    return SIMPLE_PATH_SVG


@pytest.fixture
def arrow_right_svg() -> str:
    return ARROW_RIGHT_SVG


@pytest.fixture
def order_cancel_svg() -> str:
    return ORDER_CANCEL_SVG


@pytest.fixture
def connection_error_svg() -> str:
    return CONNECTION_ERROR_SVG


@pytest.fixture
def grouped_svg() -> str:
    return GROUPED_SVG
