from reftoken.main import run

run()
