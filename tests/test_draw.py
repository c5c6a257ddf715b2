"""Tests for the frame model and drawing primitives."""

from fighter_sprites.draw import apply_glow, compute_outline, fill_disc, fill_rect, rgba, set_pixel
from fighter_sprites.frame import clone_frame, create_frame, frame_size
from fighter_sprites.render import parse_color

RED = "#ff0000"
BLUE = "#0000ff"
OUTLINE = "#000000"


def painted(frame):
    return {(x, y) for y, row in enumerate(frame) for x, px in enumerate(row) if px is not None}


class TestFrameModel:
    """Tests for frame allocation and copying."""

    def test_create_frame_is_transparent(self):
        frame = create_frame(4, 3)
        assert frame_size(frame) == (4, 3)
        assert all(px is None for row in frame for px in row)

    def test_rows_are_not_shared(self):
        frame = create_frame(3, 3)
        frame[0][0] = RED
        assert frame[1][0] is None

    def test_clone_has_no_aliasing(self):
        frame = create_frame(3, 3)
        frame[1][1] = RED
        copy = clone_frame(frame)
        assert copy == frame
        copy[1][1] = BLUE
        copy[0][0] = BLUE
        assert frame[1][1] == RED
        assert frame[0][0] is None


class TestSetPixelAndRect:
    """Tests for set_pixel and fill_rect clipping."""

    def test_set_pixel_in_bounds(self, small_frame):
        set_pixel(small_frame, 2, 3, RED)
        assert small_frame[3][2] == RED

    def test_set_pixel_out_of_bounds_is_noop(self, small_frame):
        for x, y in [(-1, 0), (0, -1), (5, 0), (0, 5), (100, 100)]:
            set_pixel(small_frame, x, y, RED)
        assert painted(small_frame) == set()

    def test_fill_rect_half_open(self, small_frame):
        fill_rect(small_frame, 1, 1, 2, 3, RED)
        assert painted(small_frame) == {(1, 1), (2, 1), (1, 2), (2, 2), (1, 3), (2, 3)}

    def test_fill_rect_clips_at_edges(self, small_frame):
        fill_rect(small_frame, -2, 3, 4, 5, RED)
        assert painted(small_frame) == {(0, 3), (1, 3), (0, 4), (1, 4)}

    def test_fill_rect_fully_outside(self, small_frame):
        fill_rect(small_frame, 6, 6, 3, 3, RED)
        fill_rect(small_frame, 0, 0, 0, 3, RED)
        assert painted(small_frame) == set()


class TestFillDisc:
    """Tests for fill_disc."""

    def test_radius_one_is_a_plus(self, small_frame):
        fill_disc(small_frame, 2, 2, 1, RED)
        assert painted(small_frame) == {(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)}

    def test_disc_clipped_at_corner(self, small_frame):
        fill_disc(small_frame, 0, 0, 1, RED)
        assert painted(small_frame) == {(0, 0), (1, 0), (0, 1)}

    def test_disc_radius_two(self, small_frame):
        fill_disc(small_frame, 2, 2, 2, RED)
        # corners of the 5x5 box lie outside r^2 = 4
        assert small_frame[0][0] is None
        assert small_frame[1][1] == RED
        assert small_frame[0][2] == RED
        assert len(painted(small_frame)) == 13


class TestApplyGlow:
    """Tests for apply_glow."""

    def test_zero_intensity_leaves_frame_unchanged(self, effect_frame):
        fill_rect(effect_frame, 10, 10, 4, 4, RED)
        before = clone_frame(effect_frame)
        apply_glow(effect_frame, 16, 16, 10, (255, 0, 0), 0)
        assert effect_frame == before

    def test_alpha_decreases_with_distance(self, effect_frame):
        apply_glow(effect_frame, 16, 16, 10, (255, 0, 0), 1.0)
        alphas = [parse_color(effect_frame[16][16 + d])[3] for d in range(10)]
        assert alphas[0] == 255
        assert all(a > b for a, b in zip(alphas, alphas[1:]))

    def test_boundary_radius_is_left_transparent(self, effect_frame):
        apply_glow(effect_frame, 16, 16, 10, (255, 0, 0), 1.0)
        assert effect_frame[16][26] is None
        assert effect_frame[16][25] == "rgba(255,0,0,0.19)"

    def test_faint_glow_writes_nothing(self, effect_frame):
        apply_glow(effect_frame, 16, 16, 6, (255, 0, 0), 0.004)
        assert painted(effect_frame) == set()

    def test_alpha_rounding_to_zero_is_skipped(self):
        frame = create_frame(48, 48)
        apply_glow(frame, 24, 24, 20, (255, 0, 0), 0.1)
        # dist_sq 389 gives alpha 0.00275
        assert frame[24 + 10][24 + 17] is None
        assert frame[24][24 + 19] == "rgba(255,0,0,0.01)"
        assert not any(px.endswith(",0.00)") for row in frame for px in row if px)

    def test_intensity_scales_alpha(self, effect_frame):
        apply_glow(effect_frame, 16, 16, 5, (1, 2, 3), 0.5)
        assert effect_frame[16][16] == "rgba(1,2,3,0.50)"

    def test_later_glow_overwrites(self, effect_frame):
        apply_glow(effect_frame, 16, 16, 8, (255, 0, 0), 1.0)
        apply_glow(effect_frame, 16, 16, 3, (0, 0, 255), 1.0)
        assert effect_frame[16][16] == "rgba(0,0,255,1.00)"
        assert effect_frame[16][22].startswith("rgba(255,0,0,")

    def test_glow_clips_at_edges(self):
        frame = create_frame(4, 4)
        apply_glow(frame, 0, 0, 3, (9, 9, 9), 1.0)
        assert frame[0][0] == "rgba(9,9,9,1.00)"
        assert frame[3][3] is None

    def test_rgba_formatting(self):
        assert rgba((159, 225, 255), 0.3) == "rgba(159,225,255,0.30)"


class TestComputeOutline:
    """Tests for compute_outline."""

    def test_single_pixel_gets_eight_neighbours(self, small_frame):
        small_frame[2][2] = RED
        out = compute_outline(small_frame, OUTLINE)
        ring = {(x, y) for x in range(1, 4) for y in range(1, 4)} - {(2, 2)}
        assert {p for p in painted(out) if out[p[1]][p[0]] == OUTLINE} == ring
        assert out[2][2] == RED

    def test_pixels_without_opaque_neighbours_stay_transparent(self, small_frame):
        small_frame[2][2] = RED
        out = compute_outline(small_frame, OUTLINE)
        for x, y in [(0, 0), (4, 4), (0, 2), (2, 4)]:
            assert out[y][x] is None

    def test_opaque_pixels_never_overwritten(self, small_frame):
        fill_rect(small_frame, 1, 1, 3, 1, RED)
        small_frame[2][2] = BLUE
        out = compute_outline(small_frame, OUTLINE)
        assert out[1][1:4] == [RED, RED, RED]
        assert out[2][2] == BLUE

    def test_input_frame_not_modified(self, small_frame):
        small_frame[2][2] = RED
        before = clone_frame(small_frame)
        compute_outline(small_frame, OUTLINE)
        assert small_frame == before

    def test_single_pass_only(self, small_frame):
        small_frame[2][2] = RED
        out = compute_outline(compute_outline(small_frame, OUTLINE), OUTLINE)
        # second pass grows the outline, proving one call is one ring
        assert len(painted(out)) == 25
        assert len(painted(compute_outline(small_frame, OUTLINE))) == 9

    def test_edge_pixels_clip(self, small_frame):
        small_frame[0][0] = RED
        out = compute_outline(small_frame, OUTLINE)
        assert painted(out) == {(0, 0), (1, 0), (0, 1), (1, 1)}
