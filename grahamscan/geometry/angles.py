from grahamscan.geometry.coord import Coord2D

# sign pairs of a direction vector, counter-clockwise from the positive x-axis
REGIONS = ((0, 0), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1))
REGION_INDEX = {region: idx for idx, region in enumerate(REGIONS)}


def cmp(a, b):
    return (a > b) - (a < b)


def region_index(dx, dy):
    return REGION_INDEX[(cmp(dx, 0), cmp(dy, 0))]


def compare_angle(base1, coord1, base2, coord2):
    '''
    Compares the angles of two line segments without trigonometry.

    :param base1: base point of the first segment
    :param coord1: other point of the first segment
    :param base2: base point of the second segment
    :param coord2: other point of the second segment
    :return: -1 if the first segment has the smaller angle, 1 if greater, 0 if equal
    '''
    x1, y1 = Coord2D(*coord1) - base1
    x2, y2 = Coord2D(*coord2) - base2

    region1 = region_index(x1, y1)
    region2 = region_index(x2, y2)
    if region1 != region2:
        return cmp(region1, region2)

    return cmp(y1 * x2 - y2 * x1, 0)
