import os
import sys

# modules live flat in huffcode/ and import each other by bare name
SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'huffcode'))
if SRC not in sys.path:
	sys.path.insert(0, SRC)
