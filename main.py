from builder import run_builder
import sys

if __name__ == '__main__':
    sys.exit(run_builder(sys.argv[1:]))
