"""
Last-used parameter API endpoints.
"""

from fastapi import APIRouter, HTTPException, Depends

from roicalc.api.schemas import ParametersBody, parameters_to_response
from roicalc.services.parameter_store import ParameterStore, get_parameter_store

router = APIRouter()


@router.get("/{model_type}")
async def get_parameters(
    model_type: int,
    store: ParameterStore = Depends(get_parameter_store),
):
    """Get the last-used parameters for a model, or its defaults."""
    try:
        params = store.load(model_type)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return parameters_to_response(params)


@router.put("/{model_type}")
async def save_parameters(
    model_type: int,
    parameters: ParametersBody,
    store: ParameterStore = Depends(get_parameter_store),
):
    """Remember the parameters last entered for a model."""
    if parameters.model_type != model_type:
        raise HTTPException(
            status_code=400,
            detail="Model type in path and body do not match",
        )

    params = parameters.to_parameters()
    store.save(params)

    return parameters_to_response(params)
