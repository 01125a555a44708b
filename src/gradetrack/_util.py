"""Private helper utilities."""

import pandas as pd


def in_jupyter_notebook() -> bool:
    """Determine if the code is being run in a Jupyter notebook."""
    try:
        shell = get_ipython().__class__.__name__  # pyright: ignore
        return shell == "ZMQInteractiveShell"
    except NameError:
        return False


def ensure_df(x) -> pd.DataFrame:
    """Helps convince the type checker that a variable is a DataFrame."""
    assert isinstance(x, pd.DataFrame)
    return x
