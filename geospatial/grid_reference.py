"""
Alphanumeric Grid References.

This module turns projected easting/northing coordinates into the
letter-coded grid references used by national grid systems, such as
``TG 51409 13177`` on the British National Grid.

Lettering Scheme
----------------
Grid squares are 100 km on a side. Each letter names one cell of a 5x5
block, lettered A to Z row by row from the top-left with I left out:

    A B C D E
    F G H J K
    L M N O P
    Q R S T U
    V W X Y Z

A code with several letters is a positional number in base 5 per axis:
the last letter names the 100 km square inside its 500 km block, the
letter before it names that block inside the next coarser block, and so
on. The first letter is shifted by the position of the grid's
configured bottom-left letter, so that the British grid's origin square
reads "SV" rather than "AV".
"""

from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np

from common.constants import GeodeticConstants
from common.logging_config import get_logger
from common.types import EastingNorthing

logger = get_logger(__name__)

SQUARE_SIZE = GeodeticConstants.GRID_SQUARE_SIZE.value
BLOCK = GeodeticConstants.LETTER_GRID_SIZE.value
# Left out of every lettering block
SKIPPED_LETTER = "I"
_SKIPPED_INDEX = ord(SKIPPED_LETTER) - ord("A")


def letter_to_index(letter: str) -> int:
    """Convert an upper-case grid letter to its index in a 5x5 block.

    Parameters
    ----------
    letter : str
        A single upper-case letter other than "I".

    Returns
    -------
    int
        Index 0-24, row-major from the top-left.

    Raises
    ------
    ValueError
        If `letter` is not a usable grid letter.
    """
    if len(letter) != 1 or not "A" <= letter <= "Z" or letter == SKIPPED_LETTER:
        raise ValueError(f"Not a grid letter: {letter!r}")
    offset = ord(letter) - ord("A")
    return offset - 1 if offset > _SKIPPED_INDEX else offset


def index_to_letter(index: int) -> str:
    """Convert an index in a 5x5 block to its grid letter (skipping "I")."""
    if not 0 <= index < BLOCK * BLOCK:
        raise ValueError(f"Grid letter index out of range: {index}")
    return chr(ord("A") + (index + 1 if index >= _SKIPPED_INDEX else index))


def index_to_xy(index: int) -> Tuple[int, int]:
    """Convert an index in a 5x5 block to (x, y), with y counted from the bottom."""
    if not 0 <= index < BLOCK * BLOCK:
        raise ValueError(f"Grid letter index out of range: {index}")
    return index % BLOCK, (BLOCK - 1) - index // BLOCK


def xy_to_index(x: int, y: int) -> int:
    """Convert (x, y), with y counted from the bottom, to an index in a 5x5 block."""
    if not (0 <= x < BLOCK and 0 <= y < BLOCK):
        raise ValueError(f"Position ({x}, {y}) is outside the 5x5 letter block")
    return x + ((BLOCK - 1) - y) * BLOCK


@dataclass(frozen=True)
class Grid:
    """Definition of a lettered national grid.

    Attributes
    ----------
    width : int
        Number of 100 km squares east-west.
    height : int
        Number of 100 km squares north-south.
    num_digits : int
        Number of letters in a grid reference.
    bottom_left_first_char : str
        First letter of the square containing the grid's false origin.
    name : str
        Identifier for the grid.
    """
    width: int
    height: int
    num_digits: int
    bottom_left_first_char: str
    name: str = ""

    def __post_init__(self):
        """Validate the grid against its lettering."""
        if self.num_digits < 1:
            raise ValueError(f"num_digits must be at least 1, got {self.num_digits}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid size must be positive, got {self.width}x{self.height}"
            )

        off_x, off_y = index_to_xy(letter_to_index(self.bottom_left_first_char))
        outer = BLOCK ** (self.num_digits - 1)
        if off_x + (self.width - 1) // outer >= BLOCK or off_y + (self.height - 1) // outer >= BLOCK:
            raise ValueError(
                f"A {self.width}x{self.height} grid starting at "
                f"{self.bottom_left_first_char!r} runs off its 5x5 lettering"
            )


@dataclass(frozen=True)
class GridRef:
    """A grid reference: letter code plus the offset inside its square.

    Attributes
    ----------
    code : str
        Letters naming the 100 km square, e.g. "TG".
    easting : float
        Easting within the square, in meters [0, 100000).
    northing : float
        Northing within the square, in meters [0, 100000).
    height : float
        Height carried through from the input (METERS).
    """
    code: str
    easting: float
    northing: float
    height: float = 0.0

    def format(self, digits: int = GeodeticConstants.MAX_REFERENCE_DIGITS.value) -> str:
        """Render the reference as text, e.g. "TG 51409 13177".

        Parameters
        ----------
        digits : int
            Total figures after the letters, split evenly between easting
            and northing. Must be even, 0-10. Figures are truncated, not
            rounded, so the reference names the square containing the point.

        Returns
        -------
        str
            The formatted reference.
        """
        if digits % 2 or not 0 <= digits <= GeodeticConstants.MAX_REFERENCE_DIGITS.value:
            raise ValueError(f"digits must be an even number from 0 to 10, got {digits}")
        if digits == 0:
            return self.code

        per_axis = digits // 2
        unit = 10 ** (GeodeticConstants.MAX_REFERENCE_DIGITS.value // 2 - per_axis)
        easting = int(self.easting // unit)
        northing = int(self.northing // unit)
        return f"{self.code} {easting:0{per_axis}d} {northing:0{per_axis}d}"

    def __str__(self) -> str:
        """Full ten-figure reference, e.g. "TG 51409 13177"."""
        return self.format()


def eastings_northings_to_grid_ref(
    point: EastingNorthing,
    grid: Grid
) -> Optional[GridRef]:
    """Encode a projected position as a grid reference.

    Parameters
    ----------
    point : EastingNorthing
        Position on the grid's projection (meters).
    grid : Grid
        Lettering of the grid.

    Returns
    -------
    GridRef or None
        The grid reference, or None when the position lies outside the
        squares the grid covers.
    """
    sq_x = int(np.floor(point.easting / SQUARE_SIZE))
    sq_y = int(np.floor(point.northing / SQUARE_SIZE))

    if sq_x < 0 or sq_y < 0 or sq_x >= grid.width or sq_y >= grid.height:
        logger.debug(
            f"({point.easting:.3f}, {point.northing:.3f}) lies outside "
            f"grid {grid.name or '<unnamed>'} ({grid.width}x{grid.height} squares)"
        )
        return None

    first_x, first_y = index_to_xy(letter_to_index(grid.bottom_left_first_char))

    # Least significant letter first
    letters = [""] * grid.num_digits
    for i in range(grid.num_digits - 1, -1, -1):
        off_x, off_y = (first_x, first_y) if i == 0 else (0, 0)
        letters[i] = index_to_letter(xy_to_index(off_x + sq_x % BLOCK, off_y + sq_y % BLOCK))
        sq_x //= BLOCK
        sq_y //= BLOCK

    return GridRef(
        code="".join(letters),
        easting=float(np.fmod(point.easting, SQUARE_SIZE)),
        northing=float(np.fmod(point.northing, SQUARE_SIZE)),
        height=point.height
    )
