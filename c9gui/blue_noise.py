"""Tiled 32x32 blue-noise texture used to dither gradients."""

from __future__ import annotations

_SIZE = 32

_TEXTURE: tuple[tuple[int, ...], ...] = (
    (153, 167, 218, 245, 148, 195, 210, 228, 140, 242, 35, 59, 253, 146, 111, 9, 248, 121, 57, 95, 78, 190, 231, 61, 114, 18, 66, 105, 144, 192, 95, 73),
    (251, 87, 57, 177, 121, 76, 23, 110, 66, 162, 214, 119, 90, 44, 218, 65, 137, 166, 21, 226, 46, 214, 127, 40, 242, 153, 179, 82, 5, 212, 17, 124),
    (36, 111, 16, 44, 234, 7, 172, 131, 191, 83, 9, 175, 133, 230, 189, 33, 178, 235, 195, 147, 117, 28, 164, 140, 91, 200, 32, 219, 238, 135, 62, 185),
    (146, 224, 208, 138, 98, 155, 217, 40, 250, 29, 152, 238, 16, 74, 160, 100, 82, 1, 105, 70, 255, 176, 83, 8, 223, 51, 126, 161, 113, 44, 170, 231),
    (25, 190, 80, 64, 199, 244, 88, 57, 118, 98, 201, 52, 108, 205, 25, 126, 211, 53, 133, 204, 14, 58, 237, 191, 109, 67, 252, 22, 75, 204, 88, 104),
    (130, 2, 170, 115, 28, 181, 12, 145, 168, 224, 71, 182, 141, 248, 60, 226, 151, 246, 184, 37, 157, 99, 208, 145, 19, 169, 97, 196, 150, 10, 244, 53),
    (71, 250, 150, 229, 49, 124, 74, 235, 209, 2, 128, 36, 94, 6, 171, 117, 43, 19, 87, 112, 222, 74, 121, 45, 181, 132, 233, 41, 138, 178, 220, 158),
    (201, 93, 38, 214, 101, 163, 198, 24, 106, 47, 160, 232, 193, 147, 75, 197, 96, 161, 233, 175, 137, 4, 243, 30, 225, 78, 0, 212, 63, 107, 32, 120),
    (235, 59, 184, 9, 143, 248, 61, 134, 189, 81, 253, 63, 113, 29, 222, 242, 11, 65, 213, 25, 54, 198, 166, 149, 90, 55, 188, 122, 240, 84, 193, 17),
    (168, 111, 132, 82, 21, 206, 91, 33, 175, 152, 18, 215, 177, 87, 51, 130, 186, 142, 121, 80, 249, 104, 67, 216, 114, 246, 154, 96, 13, 164, 49, 142),
    (209, 29, 220, 233, 173, 45, 112, 239, 223, 120, 96, 136, 11, 206, 157, 34, 103, 204, 45, 155, 187, 37, 128, 10, 195, 20, 173, 37, 131, 225, 255, 76),
    (43, 101, 154, 68, 122, 192, 158, 4, 71, 54, 196, 42, 246, 70, 119, 173, 254, 6, 229, 92, 15, 236, 177, 83, 139, 48, 222, 205, 66, 183, 92, 3),
    (196, 247, 182, 52, 16, 251, 80, 146, 211, 22, 236, 166, 106, 149, 231, 21, 79, 61, 167, 219, 143, 109, 207, 58, 252, 102, 75, 144, 22, 110, 156, 125),
    (64, 144, 8, 89, 138, 217, 39, 103, 179, 125, 78, 186, 2, 57, 216, 94, 197, 113, 129, 27, 70, 43, 159, 226, 27, 167, 116, 190, 243, 53, 215, 172),
    (27, 116, 227, 198, 107, 169, 60, 202, 232, 34, 142, 93, 201, 132, 39, 179, 141, 48, 184, 247, 200, 124, 8, 90, 187, 129, 3, 228, 35, 86, 12, 234),
    (97, 78, 163, 34, 240, 23, 131, 87, 7, 163, 253, 64, 26, 240, 161, 12, 232, 211, 0, 81, 99, 176, 242, 151, 68, 42, 203, 94, 176, 150, 135, 203),
    (187, 56, 210, 123, 69, 185, 221, 154, 117, 48, 214, 107, 224, 118, 86, 71, 104, 153, 36, 162, 217, 50, 19, 111, 213, 237, 159, 60, 119, 72, 245, 40),
    (130, 20, 254, 151, 46, 98, 13, 247, 73, 188, 20, 176, 148, 50, 189, 250, 126, 61, 239, 115, 134, 65, 195, 143, 84, 12, 136, 251, 17, 217, 106, 157),
    (222, 178, 86, 5, 235, 171, 139, 56, 206, 101, 137, 79, 11, 207, 31, 172, 15, 199, 91, 186, 26, 255, 221, 35, 171, 53, 105, 182, 31, 193, 51, 1),
    (67, 102, 141, 190, 110, 79, 197, 30, 164, 233, 40, 245, 160, 95, 134, 220, 42, 144, 228, 9, 76, 155, 93, 125, 189, 226, 77, 207, 126, 165, 84, 239),
    (169, 30, 204, 58, 219, 39, 229, 118, 89, 1, 127, 198, 55, 230, 66, 109, 79, 165, 55, 209, 175, 46, 106, 3, 246, 24, 153, 44, 95, 230, 147, 116),
    (43, 247, 123, 21, 160, 133, 14, 180, 145, 216, 69, 113, 183, 6, 152, 192, 243, 27, 100, 117, 137, 236, 203, 163, 60, 114, 138, 241, 8, 62, 23, 212),
    (77, 92, 148, 236, 73, 104, 253, 63, 47, 241, 168, 28, 85, 254, 123, 17, 213, 131, 183, 249, 38, 16, 69, 216, 88, 180, 219, 72, 173, 200, 136, 182),
    (227, 192, 7, 49, 174, 211, 84, 152, 191, 18, 99, 208, 139, 38, 177, 49, 90, 68, 1, 154, 85, 191, 127, 148, 33, 14, 194, 103, 37, 249, 108, 13),
    (128, 162, 218, 112, 188, 32, 4, 205, 108, 130, 232, 155, 62, 225, 103, 159, 237, 201, 229, 59, 171, 221, 48, 99, 252, 132, 52, 161, 124, 86, 157, 56),
    (100, 35, 64, 136, 89, 243, 122, 168, 38, 77, 52, 185, 23, 203, 74, 135, 32, 116, 145, 97, 30, 112, 234, 167, 199, 80, 231, 0, 223, 209, 26, 239),
    (73, 199, 250, 24, 156, 227, 56, 140, 218, 249, 7, 93, 120, 244, 5, 194, 174, 45, 15, 185, 208, 75, 5, 20, 63, 118, 149, 184, 68, 47, 143, 178),
    (230, 119, 170, 10, 105, 181, 70, 15, 97, 194, 174, 146, 213, 165, 108, 58, 252, 81, 225, 127, 245, 158, 141, 180, 212, 41, 244, 25, 96, 115, 193, 6),
    (41, 149, 54, 207, 81, 41, 200, 237, 159, 114, 31, 67, 42, 83, 18, 151, 215, 100, 165, 65, 50, 91, 120, 238, 85, 107, 170, 139, 206, 254, 166, 85),
    (215, 94, 241, 142, 224, 115, 129, 26, 82, 55, 234, 221, 134, 240, 187, 123, 28, 140, 4, 194, 36, 202, 24, 220, 54, 31, 196, 10, 76, 59, 19, 133),
    (181, 29, 69, 188, 13, 164, 255, 179, 150, 205, 125, 11, 169, 98, 51, 227, 72, 180, 238, 110, 135, 251, 72, 147, 162, 129, 89, 228, 122, 156, 223, 109),
    (202, 3, 128, 102, 34, 62, 92, 47, 0, 102, 183, 77, 197, 22, 158, 202, 88, 39, 210, 156, 14, 172, 101, 2, 186, 210, 248, 46, 174, 33, 241, 50),
)


def get_blue_noise_value(x: int, y: int) -> float:
    """Blue-noise value in [0, 1] at ``(x, y)``; the texture repeats every 32 pixels."""
    return _TEXTURE[x % _SIZE][y % _SIZE] / 255