from external_game_data.cli import app

app()
