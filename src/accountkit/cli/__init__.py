"""CLI (Typer + Rich) sobre la fachada `AccountKit`."""
