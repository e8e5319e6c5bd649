import logging

from cq_post import MILLIMETER, Point, Program, get_post_processor


def demo():
    post = get_post_processor("grbl", MILLIMETER)
    program = (
        Program(post, name="Square")
        .begin()
        .comment("Square 20x20 depth 1")
        .move_to_machine_origin()
        .set_spindle_speed(18000)
        .fast_move_to(Point(0, 0, 5))
        .move_to(Point(z=-1), 300)
    )
    for x, y in [(20, 0), (20, 20), (0, 20), (0, 0)]:
        program.move_to(Point(x, y), 600)
    program.fast_move_to(Point(z=5)).end()
    print(program.to_gcode())


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    demo()
