def pixels_to_meters(scale: float, pixels: float) -> float:
    """
    :param scale: scenario scale [m/px]
    :param pixels: length on the map [px]
    :return: length in the world [m]
    """
    return pixels * scale


def meters_to_pixels(scale: float, meters: float) -> float:
    return meters / scale
