from fastapi import APIRouter

from pantry_chef.api.assistant import router as assistant_router
from pantry_chef.api.health import router as health_router
from pantry_chef.api.matching import router as matching_router
from pantry_chef.api.meal_plan import router as meal_plan_router
from pantry_chef.api.pantry import router as pantry_router
from pantry_chef.api.recipes import router as recipes_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(pantry_router)
router.include_router(recipes_router)
router.include_router(matching_router)
router.include_router(meal_plan_router)
router.include_router(assistant_router)
