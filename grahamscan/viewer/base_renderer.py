class BaseRenderer:
    def __init__(self):
        # axes receiving clicks, None when the renderer has no matplotlib axes
        self.ax = None
    def draw(self, points, hull, message):
        raise NotImplementedError
