from fastapi import APIRouter

from app.rules.rule_registry import list_rules

router = APIRouter()


@router.get("/health")
def health_check():
    """Health endpoint — confirms FastAPI is running and the rule registry loaded."""
    return {
        "status": "healthy",
        "rules_registered": len(list_rules()),
    }
