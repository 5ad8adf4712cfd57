"""
Preview rasterization of layouts, backed by OpenCV.

This is a diagnostic renderer for galleries, GIFs and the console demo, not a
faithful reproduction of any front end.  All drawing functions operate on
float32 RGB numpy arrays in [0, 1] range.
"""

import os

import cv2
import numpy as np


# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------

def hex_to_rgb(color):
    """'#rrggbb' (or 'rrggbb') -> (r, g, b) floats in [0, 1]."""
    h = color.lstrip("#")
    return tuple(int(h[i:i + 2], 16) / 255.0 for i in (0, 2, 4))


def _pt(p):
    return int(round(p[0])), int(round(p[1]))


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

def rasterize_filled_circle(img, center, radius, color):
    cv2.circle(img, _pt(center), int(max(round(radius), 1)), color, -1, lineType=cv2.LINE_AA)
    return img


def rasterize_filled_rounded_rectangle(img, corner1, corner2, radius, color):
    """Filled axis-aligned rectangle with circular corners of *radius*."""
    x1, y1 = _pt(corner1)
    x2, y2 = _pt(corner2)
    r = int(max(0, min(round(radius), (x2 - x1) // 2, (y2 - y1) // 2)))
    if r == 0:
        cv2.rectangle(img, (x1, y1), (x2, y2), color, -1, lineType=cv2.LINE_AA)
        return img
    cv2.rectangle(img, (x1 + r, y1), (x2 - r, y2), color, -1, lineType=cv2.LINE_AA)
    cv2.rectangle(img, (x1, y1 + r), (x2, y2 - r), color, -1, lineType=cv2.LINE_AA)
    for cx, cy in ((x1 + r, y1 + r), (x2 - r, y1 + r), (x1 + r, y2 - r), (x2 - r, y2 - r)):
        cv2.circle(img, (cx, cy), r, color, -1, lineType=cv2.LINE_AA)
    return img


def rasterize_rotated_rectangle(img, center, size, angle, color):
    """Filled rectangle of (w, h) *size* rotated by *angle* degrees."""
    box = cv2.boxPoints(((float(center[0]), float(center[1])),
                         (float(size[0]), float(size[1])), float(angle)))
    cv2.fillPoly(img, [np.round(box).astype(np.int32)], color, lineType=cv2.LINE_AA)
    return img


def rasterize_rotated_ellipse(img, center, size, angle, color):
    axes = (int(max(round(size[0] / 2), 1)), int(max(round(size[1] / 2), 1)))
    cv2.ellipse(img, _pt(center), axes, float(angle), 0, 360, color, -1, lineType=cv2.LINE_AA)
    return img


def rasterize_line(img, p1, p2, color, thickness=1, opacity=1.0):
    """Anti-aliased line, alpha-blended onto *img* when *opacity* < 1."""
    t = int(max(round(thickness), 1))
    if opacity >= 1.0:
        cv2.line(img, _pt(p1), _pt(p2), color, t, lineType=cv2.LINE_AA)
        return img
    overlay = img.copy()
    cv2.line(overlay, _pt(p1), _pt(p2), color, t, lineType=cv2.LINE_AA)
    img[:] = cv2.addWeighted(overlay, float(opacity), img, 1.0 - float(opacity), 0.0)
    return img


# ---------------------------------------------------------------------------
# Layout rendering
# ---------------------------------------------------------------------------

def _draw_background(img, bg, canvas_color):
    base = hex_to_rgb(bg.color)
    fill = hex_to_rgb(bg.fill_color)
    if bg.kind == "rect":
        rasterize_filled_rounded_rectangle(
            img, (bg.x, bg.y), (bg.x + bg.width - 1, bg.y + bg.height - 1),
            bg.corner_radius, base)
        rasterize_filled_rounded_rectangle(
            img, (bg.x + bg.inset, bg.y + bg.inset),
            (bg.x + bg.width - bg.inset - 1, bg.y + bg.height - bg.inset - 1),
            max(0.0, bg.corner_radius - bg.inset), fill)
        return
    center = (bg.x + bg.width / 2.0, bg.y + bg.height / 2.0)
    outer = bg.width / 2.0
    rasterize_filled_circle(img, center, outer, base)
    rasterize_filled_circle(img, center, outer - bg.inset, fill)
    if bg.kind == "ring" and bg.hole_radius > 0:
        rasterize_filled_circle(img, center, bg.hole_radius + bg.inset, base)
        rasterize_filled_circle(img, center, bg.hole_radius, canvas_color)


def _draw_decoration(img, d):
    color = hex_to_rgb(d.color)
    if abs(d.width - d.height) < 1e-6:
        rasterize_filled_circle(img, (d.x, d.y), d.width / 2.0, color)
    elif min(d.width, d.height) / max(d.width, d.height) > 0.5:
        rasterize_rotated_ellipse(img, (d.x, d.y), (d.width, d.height), d.rotation_deg, color)
    else:
        rasterize_rotated_rectangle(img, (d.x, d.y), (d.width, d.height), d.rotation_deg, color)


def render_layout(layout, background="#ffffff", padding=4):
    """Rasterize *layout* to a float32 [H, W, 3] RGB image."""
    canvas_color = hex_to_rgb(background)
    H = int(np.ceil(layout.height)) + 2 * padding
    W = int(np.ceil(layout.width)) + 2 * padding
    img = np.empty((H, W, 3), dtype=np.float32)
    img[:] = canvas_color

    # draw in layout coordinates by working on an offset view
    view = img[padding:padding + int(np.ceil(layout.height)),
               padding:padding + int(np.ceil(layout.width))]
    view = np.ascontiguousarray(view)
    _draw_background(view, layout.background, canvas_color)
    for d in layout.decorations:
        _draw_decoration(view, d)
    for seg in layout.dividers:
        rasterize_line(view, (seg.x1, seg.y1), (seg.x2, seg.y2),
                       hex_to_rgb(seg.color), seg.width, seg.opacity)
    img[padding:padding + view.shape[0], padding:padding + view.shape[1]] = view
    return img


def to_uint8(img):
    return (np.clip(img, 0.0, 1.0) * 255).astype(np.uint8)


def save_png(img, path):
    """Write an RGB float image to *path* as PNG."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    cv2.imwrite(path, cv2.cvtColor(to_uint8(img), cv2.COLOR_RGB2BGR))
    return path
