from teams_handler.cli import run


if __name__ == '__main__':
    run()
