from tcgsearch.main import run

run()
