from pydantic import BaseModel


class PlanWarningResponse(BaseModel):
    id: int
    plan_id: int
    kind: str  # planner / validation
    message: str

    model_config = {
        "from_attributes": True,
    }
