from flappy.data_models import Bird, Box, Pipe


def test_gravity_integration_from_rest(physics):
    bird = Bird(y=500.0, velocity=0.0)
    physics.integrate(bird)
    assert bird.velocity == 0.8
    assert bird.y == 500.8


def test_fifteen_ticks_of_gravity_match_jump_impulse(physics):
    bird = Bird(y=0.0, velocity=0.0)
    for _ in range(15):
        physics.integrate(bird)
    assert bird.velocity == 12.0
    assert bird.velocity == -physics.jump_impulse


def test_flap_overrides_velocity(physics):
    bird = Bird(y=300.0, velocity=7.5)
    physics.flap(bird)
    assert bird.velocity == -12.0
    physics.flap(bird)
    assert bird.velocity == -12.0


def test_out_of_bounds_edges(physics):
    assert physics.out_of_bounds(Bird(y=-0.1), 1000)
    assert not physics.out_of_bounds(Bird(y=0.0), 1000)
    assert not physics.out_of_bounds(Bird(y=1000.0), 1000)
    assert physics.out_of_bounds(Bird(y=1000.1), 1000)


def test_bird_box_uses_fixed_x_and_sprite_bounds(physics):
    box = physics.bird_box(Bird(y=40.0))
    assert box == Box(100, 40.0, 200, 140.0)


class TestBoxIntersection:

    def test_touching_edges_do_not_intersect(self):
        a = Box(0, 0, 10, 10)
        assert not a.intersects(Box(10, 0, 20, 10))
        assert not a.intersects(Box(0, 10, 10, 20))
        assert not a.intersects(Box(-10, 0, 0, 10))

    def test_one_pixel_overlap_intersects(self):
        a = Box(0, 0, 10, 10)
        assert a.intersects(Box(9, 0, 19, 10))
        assert a.intersects(Box(0, 9, 10, 19))

    def test_symmetric(self):
        a = Box(0, 0, 10, 10)
        for b in (Box(10, 0, 20, 10), Box(9, 9, 19, 19), Box(2, 2, 3, 3)):
            assert a.intersects(b) == b.intersects(a)

    def test_contained_box_intersects(self):
        assert Box(0, 0, 100, 100).intersects(Box(40, 40, 60, 60))


class TestPipeCollision:
    # Gap of 350 centered at 500: top segment ends at 325, bottom starts at 675.

    def test_bird_inside_gap(self, physics, stream):
        pipes = [Pipe(x=100, gap_y=500)]
        assert not physics.check_collision(Bird(y=400), pipes, stream.segment_boxes)

    def test_touching_top_segment_is_not_a_hit(self, physics, stream):
        pipes = [Pipe(x=100, gap_y=500)]
        assert not physics.check_collision(Bird(y=325), pipes, stream.segment_boxes)
        assert physics.check_collision(Bird(y=324), pipes, stream.segment_boxes)

    def test_touching_bottom_segment_is_not_a_hit(self, physics, stream):
        pipes = [Pipe(x=100, gap_y=500)]
        assert not physics.check_collision(Bird(y=575), pipes, stream.segment_boxes)
        assert physics.check_collision(Bird(y=576), pipes, stream.segment_boxes)

    def test_horizontal_touch_is_not_a_hit(self, physics, stream):
        # Bird spans x 100..200 and sits level with the top segment.
        assert not physics.check_collision(Bird(y=0), [Pipe(x=200, gap_y=500)], stream.segment_boxes)
        assert physics.check_collision(Bird(y=0), [Pipe(x=199, gap_y=500)], stream.segment_boxes)
        assert not physics.check_collision(Bird(y=0), [Pipe(x=-150, gap_y=500)], stream.segment_boxes)
        assert physics.check_collision(Bird(y=0), [Pipe(x=-149, gap_y=500)], stream.segment_boxes)

    def test_any_pipe_counts(self, physics, stream):
        pipes = [Pipe(x=-500, gap_y=500), Pipe(x=150, gap_y=900)]
        assert physics.check_collision(Bird(y=400), pipes, stream.segment_boxes)

    def test_no_pipes(self, physics, stream):
        assert not physics.check_collision(Bird(y=400), [], stream.segment_boxes)
