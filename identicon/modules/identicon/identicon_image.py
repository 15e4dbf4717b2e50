from dataclasses import dataclass
from typing import Optional, Tuple

Color = Tuple[int, int, int]
GridCell = Tuple[int, int]  # (значение байта, индекс клетки)
Point = Tuple[int, int]
Rectangle = Tuple[Point, Point]  # (левый верхний угол, правый нижний угол)


@dataclass(frozen=True)
class IdenticonImage:
    """
    Состояние identicon, передаваемое между шагами конвейера.

    Каждый шаг возвращает новый экземпляр через dataclasses.replace,
    исходный объект не изменяется.

    :param hex: 16 байт MD5-дайджеста входной строки.
    :param color: Цвет заливки (R, G, B).
    :param grid: Пары (значение, индекс) клеток сетки 5x5.
    :param pixel_map: Прямоугольники в пикселях для закрашиваемых клеток.
    """

    hex: Tuple[int, ...]
    color: Optional[Color] = None
    grid: Optional[Tuple[GridCell, ...]] = None
    pixel_map: Optional[Tuple[Rectangle, ...]] = None

    @property
    def indexes(self) -> Tuple[int, ...]:
        """Индексы клеток текущей сетки в исходном порядке."""
        if self.grid is None:
            return ()
        return tuple(index for _, index in self.grid)

    @property
    def digest(self) -> str:
        """Hex-представление дайджеста."""
        return bytes(self.hex).hex()
