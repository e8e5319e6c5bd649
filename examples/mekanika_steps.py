from cq_post import INCH, Point, Program, get_post_processor


def demo():
    program = Program(get_post_processor("mekanika", INCH)).begin()
    program.fast_move_to(Point(0, 0, 0.2)).set_incremental_positioning()
    for _ in range(4):
        program.move_to(Point(x=0.25, z=-0.01), 20)
    program.set_absolute_positioning().fast_move_to(Point(z=0.2)).end()
    program.save_gcode("steps.nc")


if __name__ == '__main__':
    demo()
