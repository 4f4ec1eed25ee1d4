from spotpris.cli import app

app()
