import typer
from peptide_sequencing import cyclopeptide

app = typer.Typer(help="Reconstruct cyclic peptides from mass spectra.")

app.add_typer(cyclopeptide.app, name="cyclopeptide", help="Leaderboard sequencing with convolution alphabets")

if __name__ == "__main__":
    app()
