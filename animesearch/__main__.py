from animesearch.main import run

run()
