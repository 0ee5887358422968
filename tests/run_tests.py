import subprocess
import time


def run_tests():
    commands = [
        "coverage erase",
        "coverage run -m pytest",
        "coverage report",
        "coverage html",
    ]

    for command in commands:
        print(f"Running: {command}")
        subprocess.run(command, shell=True, check=True)


if __name__ == "__main__":
    # python -m tests.run_tests
    start_time = time.time()
    run_tests()
    elapsed_time = time.time() - start_time

    minutes = int(elapsed_time // 60)
    seconds = int(elapsed_time % 60)
    print(f"Tests finished in {minutes:02}:{seconds:02}")
