from ghost import run_ghost
import sys

if __name__ == '__main__':
    sys.exit(run_ghost(sys.argv[1:]))
