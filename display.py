from colorama import Fore, Style

BANNER = [
    r"_______           _______  _______ _________",
    r"(  ____ \|\     /|(  ___  )(  ____ \\__   __/",
    r"| (    \/| )   ( || (   ) || (    \/   ) (",
    r"| |      | (___) || |   | || (_____    | |",
    r"| | ____ |  ___  || |   | |(_____  )   | |",
    r"| | \_  )| (   ) || |   | |      ) |   | |",
    r"| (___) || )   ( || (___) |/\____) |   | |",
    r"(_______)|/     \|(_______)\_______)   )_(",
]


def clear():
    """Clear the terminal and move the cursor home (ANSI escapes)."""
    print("\033[2J", end="")
    print("\033[0;0H", end="", flush=True)

def greet():
    clear()
    print(Fore.LIGHTWHITE_EX + "\n".join(BANNER) + Style.RESET_ALL, flush=True)

def show_fragment(fragment):
    print(f"\nCurrent word fragment: {Fore.CYAN}{fragment}{Style.RESET_ALL}", flush=True)

def prompt(player):
    return f"Player {player} says letter: "

def show_rejected(fragment, letter):
    print(Fore.YELLOW + f'There\'s no word that begins with "{fragment}{letter}".' + Style.RESET_ALL)
    print("Try again.", flush=True)

def show_game_over(state):
    """Announce the loser and the word they spelled."""
    print(Fore.RED + f"\nPlayer {state.loser} loses!" + Style.RESET_ALL)
    print(f'They spelled the word "{state.fragment}".')
    print("Thanks for playing!\n", flush=True)
