"""
Recipe Units Backend - FastAPI Application
Main entry point for converting generated recipes between US and metric display units
"""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Literal

from config import (
    APP_NAME,
    APP_VERSION,
    CORS_ORIGINS,
    DEFAULT_TEMP_UNIT,
    DEFAULT_UNIT_SYSTEM,
    LOG_LEVEL,
)
from core.conversions import (
    convert_ingredient,
    convert_instruction,
    ConversionError,
    CONVERSIONS,
    INGREDIENT_DENSITY,
)
from core.models import Recipe, SavedRecipe


logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# Initialize FastAPI app
app = FastAPI(
    title=APP_NAME,
    description="Converts recipe ingredients and instructions between US and metric units",
    version=APP_VERSION
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response Models
class IngredientRequest(BaseModel):
    text: str
    unit_system: Literal["us", "metric"] = DEFAULT_UNIT_SYSTEM


class InstructionRequest(BaseModel):
    text: str
    temp_unit: Literal["f", "c"] = DEFAULT_TEMP_UNIT


class RecipeConvertRequest(BaseModel):
    recipe: dict
    unit_system: Literal["us", "metric"] = DEFAULT_UNIT_SYSTEM
    temp_unit: Literal["f", "c"] = DEFAULT_TEMP_UNIT


class ConversionResponse(BaseModel):
    original: str
    converted: str


class HealthResponse(BaseModel):
    status: str
    density_keys: list[str]
    units: list[str]


# API Endpoints
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"{APP_NAME} is running",
        "version": APP_VERSION
    }


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        density_keys=list(INGREDIENT_DENSITY),
        units=list(CONVERSIONS)
    )


@app.post("/convert/ingredient", response_model=ConversionResponse)
async def convert_ingredient_endpoint(request: IngredientRequest):
    """Convert a single ingredient line"""
    try:
        converted = convert_ingredient(request.text, request.unit_system)
    except ConversionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Ingredient conversion error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    return ConversionResponse(original=request.text, converted=converted)


@app.post("/convert/instruction", response_model=ConversionResponse)
async def convert_instruction_endpoint(request: InstructionRequest):
    """Convert the temperatures in a single instruction step"""
    try:
        converted = convert_instruction(request.text, request.temp_unit)
    except ConversionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Instruction conversion error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    return ConversionResponse(original=request.text, converted=converted)


@app.post("/recipe/convert")
async def convert_recipe(request: RecipeConvertRequest):
    """
    Convert a whole generated recipe for display.
    Saved recipes (with an id or imageUrl) keep those fields in the response.
    """
    is_saved = "id" in request.recipe or "imageUrl" in request.recipe
    try:
        if is_saved:
            recipe = SavedRecipe.from_dict(request.recipe)
        else:
            recipe = Recipe.from_dict(request.recipe)
        converted = recipe.converted(request.unit_system, request.temp_unit)
    except ConversionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Recipe conversion error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    logger.info(
        "Converted recipe '%s' to %s/%s",
        converted.recipe_name, request.unit_system, request.temp_unit
    )
    return converted.to_dict()


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize on startup"""
    logger.info("%s v%s started", APP_NAME, APP_VERSION)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
