# main.py
import argparse
import logging
from typing import List, Union

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, field_validator

from katas.entities.rover import Rover
from katas.utils.consts import EXECUTE_PATH, LOG_FORMAT, SERVER_HOST, SERVER_PORT
from katas.utils.enums import Heading
from katas.utils.errors import InvalidInstructionError

logger = logging.getLogger(__name__)

app = FastAPI(title="Mars Rover Server")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class RoverInput(BaseModel):
    heading: Union[str, int] = "N"   # "N"/"E"/"S"/"W" or 0/2/4/6
    x: int = 0
    y: int = 0
    instructions: str = ""

    @field_validator("heading")
    @classmethod
    def check_heading(cls, value):
        return Heading.parse(value).symbol


class PathPoint(BaseModel):
    x: int
    y: int
    d: int
    heading: str


class RoverOutput(BaseModel):
    heading: str
    x: int
    y: int
    path: List[PathPoint]


# =============================================================================
# CORE
# =============================================================================

def run_rover(rover: Rover, instructions: str) -> dict:
    """
    Drive the rover through the instructions and report where it ended up.

    Raises:
        InvalidInstructionError: the rover keeps every move made before
            the bad character.
    """
    rover.execute(instructions)

    state = rover.get_state()
    return {
        "heading": state.heading.symbol,
        "x": state.x,
        "y": state.y,
        "path": [s.get_dict() for s in rover.path_history],
    }


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/status")
def health_check():
    return {"status": "ok", "message": "Rover server is running"}


@app.post(EXECUTE_PATH, response_model=RoverOutput)
def execute_instructions(input_data: RoverInput):
    logger.info(
        "Execute %r from %s (%d, %d)",
        input_data.instructions, input_data.heading, input_data.x, input_data.y,
    )
    # One rover per request; nothing is shared between requests
    rover = Rover(input_data.heading, input_data.x, input_data.y)
    try:
        return run_rover(rover, input_data.instructions)
    except InvalidInstructionError as e:
        logger.warning("Rejected instructions %r: %s", input_data.instructions, e)
        raise HTTPException(status_code=400, detail={
            "message": str(e),
            "character": e.character,
            "index": e.index,
            "state": rover.get_state().get_dict(),
        })
    except Exception as e:
        logger.exception("Rover execution failed")
        raise HTTPException(status_code=500, detail=str(e))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Mars rover HTTP server")
    parser.add_argument("--host", default=SERVER_HOST)
    parser.add_argument("--port", type=int, default=SERVER_PORT)
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    uvicorn.run(app, host=args.host, port=args.port)
