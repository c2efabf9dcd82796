import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    # Playground user (the walkthrough defaults to Fred starting at zero)
    PLAYGROUND_NAME = os.getenv('PLAYGROUND_NAME', 'Fred')
    PLAYGROUND_SCORE = int(os.getenv('PLAYGROUND_SCORE', '0'))
    PLAYGROUND_INCREMENTS = int(os.getenv('PLAYGROUND_INCREMENTS', '1'))

    # Per-step output; set VERBOSE=0 to only print the final state
    VERBOSE = bool(int(os.getenv('VERBOSE', '1')))
