import typer
import pandas as pd
from pathlib import Path

from peptide_sequencing.convolution import SpectralConvolution
from peptide_sequencing.leaderboard import LeaderboardConvolutionCyclopeptide
from peptide_sequencing.spectra import INTEGER_MASSES, parse_spectrum, validate_spectrum

app = typer.Typer(help="Sequence cyclic peptides from integer mass spectra.")

DEFAULT_SPECTRUM = "57 57 71 99 129 137 170 186 194 208 228 265 285 299 307 323 356 364 394 422 493"
DEFAULT_N = 372
DEFAULT_M = 16


def load_spectrum(spectrum, file):
    if file:
        file_path = Path(file)
        if not file_path.exists():
            typer.echo(f"Error: File '{file}' not found.")
            raise typer.Exit(code=1)
        text = file_path.read_text()
    elif spectrum:
        text = spectrum
    else:
        text = DEFAULT_SPECTRUM
    try:
        values = parse_spectrum(text)
        validate_spectrum(values)
    except ValueError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)
    return values


def parse_masses(masses):
    if not masses:
        return INTEGER_MASSES
    try:
        return [int(m) for m in masses.split(",") if m.strip()]
    except ValueError:
        typer.echo(f"Error: Residue masses '{masses}' must be comma-separated integers.")
        raise typer.Exit(code=1)


@app.command("sequence")
def sequence(
    spectrum: str = typer.Argument(None, help="Space-separated integer masses (the default example spectrum if omitted)."),
    file: str = typer.Option(None, "--file", "-f", help="Read the spectrum from a text file."),
    n: int = typer.Option(DEFAULT_N, "-n", help="Leaderboard size N (ties included)."),
    m: int = typer.Option(DEFAULT_M, "-m", help="Convolution alphabet size M (ties included)."),
    masses: str = typer.Option(None, "--masses", help="Comma-separated valid residue masses."),
    max_rounds: int = typer.Option(None, "--max-rounds", help="Stop after this many expansion rounds."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the final peptide."),
):
    values = load_spectrum(spectrum, file)

    def report(peptide, score):
        typer.echo(f"new leader with score {score}: {' '.join(map(str, peptide))}")

    try:
        engine = LeaderboardConvolutionCyclopeptide(
            n, m, parse_masses(masses), max_rounds=max_rounds,
            on_new_leader=None if quiet else report,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)

    if not quiet:
        typer.echo(f"Parent mass: {values[-1]}")
    state = engine.search(values)
    if not quiet:
        typer.echo(f"Expansion alphabet: {' '.join(map(str, state.expansion)) or '(empty)'}")
        typer.echo(f"Rounds: {state.rounds}")

    if state.leader:
        typer.echo("-".join(map(str, state.leader)))
    else:
        typer.echo("No leader peptide found.")


@app.command("convolution")
def convolution(
    spectrum: str = typer.Argument(None, help="Space-separated integer masses (the default example spectrum if omitted)."),
    file: str = typer.Option(None, "--file", "-f", help="Read the spectrum from a text file."),
    m: int = typer.Option(DEFAULT_M, "-m", help="Convolution alphabet size M (ties included)."),
):
    values = load_spectrum(spectrum, file)
    try:
        conv = SpectralConvolution(m)
    except ValueError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)

    diffs = conv.convolution(values)
    alphabet = set(conv.restrict(diffs))
    ranked = [(mass, count) for mass, count in conv.ranked(diffs) if mass in alphabet]
    if not ranked:
        typer.echo("No convolution masses fall inside the residue window.")
        raise typer.Exit()

    df = pd.DataFrame(ranked, columns=["Mass", "Frequency"])
    df["Standard"] = df["Mass"].isin(INTEGER_MASSES)
    typer.echo(f"Convolution size: {len(diffs)}")
    typer.echo(df.to_string(index=False))


if __name__ == "__main__":
    app()
