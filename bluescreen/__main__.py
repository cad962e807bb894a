from bluescreen.main import run

run()
