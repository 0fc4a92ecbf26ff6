"""Dieses Modul installiert die Pakete, die der Hello-Service zur Laufzeit und Entwicklung benötigt."""

import argparse
import subprocess
import sys


def build_command(dev: bool = False) -> list:
    """Erstellt den pip-Installationsbefehl.

    Args:
        dev (bool): Wenn True, werden auch Entwicklungspakete installiert.
    """
    index_url = "https://pypi.org/simple"
    packages = [
        "Werkzeug==3.0.3",
        "flask==3.0.3",
    ]
    dev_packages = [
        "pytest==8.2.2",
        "ruff==0.7.0",
    ]
    command = [sys.executable, "-m", "pip", "install", "--index-url", index_url]
    command.extend(packages)
    if dev:
        command.extend(dev_packages)
    return command


def install_packages(dev: bool = False) -> int:
    """Installiert die erforderlichen Pakete und gibt den Rückgabecode von pip zurück."""
    command = build_command(dev=dev)
    # Ausgabe in Echtzeit weiterreichen
    with subprocess.Popen(
        command, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True
    ) as process:
        while True:
            output = process.stdout.readline()
            if output == "" and process.poll() is not None:
                break
            if output:
                print(output.strip())
        rc = process.poll()
        if rc != 0:
            print("Error installing packages.")
            for error in process.stderr:
                print(error.strip())
    return rc


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Install required packages.")
    parser.add_argument(
        "--dev", action="store_true", help="Include development packages."
    )
    args = parser.parse_args()
    sys.exit(install_packages(dev=args.dev))
