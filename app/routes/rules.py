from fastapi import APIRouter, HTTPException

from app.models.schemas import EvaluateRequest, EvaluateResponse, RuleListResponse
from app.rules.errors import DataStoreError, InvalidInputError, UnknownRuleError
from app.rules.rule_registry import evaluate, list_rules

router = APIRouter()


@router.get("/rules", response_model=RuleListResponse)
def get_rules():
    """List every registered rule name."""
    return RuleListResponse(rules=list_rules())


@router.post("/rules/{rule_name}/evaluate", response_model=EvaluateResponse)
def evaluate_rule(rule_name: str, body: EvaluateRequest):
    """Evaluate exactly one rule against one field value.

    A failed rule is a normal 200 response with passed=false. Errors are
    reserved for unknown rules (404), input outside the rule's contract (422)
    and an unreachable or failing data store (503).

    checkUnique needs a UniqueConstraint built by trusted code, which a JSON
    body can never supply, so it always answers 422 here.
    """
    try:
        verdict = evaluate(rule_name, body.field, body.value, body.requirement)
    except UnknownRuleError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except DataStoreError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return EvaluateResponse(rule=rule_name, field=body.field, passed=verdict)
