from typing import Optional

import typer
from rich.console import Console
from rich.traceback import install

import kotree

console = Console()
install(show_locals=True)

app = typer.Typer()


# Plain output: no markup, no highlighting, no wrapping.
def echo(text: str) -> None:
    console.print(text, highlight=False, markup=False, soft_wrap=True)


def print_member(key: str, found: bool) -> None:
    echo(f"member({key}) = {int(found)}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    ctx.obj = logging
    if ctx.invoked_subcommand is not None:
        return

    try:
        for query, found in kotree.run_demo(is_logging=logging):
            print_member(query, found)
    except Exception as e:
        console.print(f"[bold red]Unexpected error:[/] {e}")
        raise typer.Exit(1)


@app.command()
def build(
    ctx: typer.Context,
    keys: list[str] = typer.Argument(..., help="Keys to insert, in order"),
    member: Optional[list[str]] = typer.Option(
        None, "-m", "--member", help="Key to look up (repeatable)"
    ),
    show: bool = typer.Option(False, "-s", "--show", help="Print the tree"),
) -> None:
    try:
        tree = kotree.from_keys(keys, is_logging=ctx.obj)

        echo(f"keys: {', '.join(kotree.keys(tree))}")
        echo(f"size: {kotree.size(tree)}")
        echo(f"height: {kotree.height(tree)}")

        for key in member or []:
            print_member(key, kotree.member(kotree.make_string(key), tree))

        if show:
            echo(kotree.format_tree(tree))
    except Exception as e:
        console.print(f"[bold red]Unexpected error:[/] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
