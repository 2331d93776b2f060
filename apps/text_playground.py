# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "marimo",
#     "polars",
#     "textcraft",
# ]
#
# [tool.marimo.display]
# theme = "system"
# ///

import marimo

__generated_with = "0.19.4"
app = marimo.App(
    width="medium",
    app_title="textcraft Playground",
)

with app.setup:
    import marimo as mo
    import polars as pl

    from textcraft import STYLES, stylize
    from textcraft.registry import TRANSFORMS


@app.cell
def title():
    mo.md("""
    # textcraft Playground

    Type some text and compare every transform side by side.
    """)
    return


@app.cell
def inputs():
    text_input = mo.ui.text_area(
        value="  The Lord OF the rings: <b>Café</b> Déjà Vu!  ",
        label="Text",
        full_width=True,
    )
    style_input = mo.ui.dropdown(options=list(STYLES), value="leet", label="Style")
    mo.vstack([text_input, style_input])
    return style_input, text_input


@app.cell
def styled(style_input, text_input):
    mo.md(f"**{style_input.value}:** `{stylize(text_input.value, style_input.value)}`")
    return


@app.cell
def results(text_input):
    _rows = [
        {"transform": name, "result": str(func(text_input.value))}
        for name, func in TRANSFORMS.items()
    ]
    mo.ui.table(pl.DataFrame(_rows), selection=None, page_size=25)
    return


if __name__ == "__main__":
    app.run()
