"""fenboard — decode FEN chess positions and render them as text grids."""

__version__ = "0.1.0"
