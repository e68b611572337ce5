from fastapi import APIRouter, Depends, HTTPException

from classpoint.dependencies import get_classroom
from classpoint.errors import InsufficientBalance, InvalidDelta, NotFound
from classpoint.models import find_reward
from classpoint.schemas.point import PointAdjustment, PointChangeOut, RedeemRequest
from classpoint.schemas.student import StudentOut
from classpoint.services.classroom import Classroom

router = APIRouter()


@router.post("/{student_id}/points", response_model=PointChangeOut)
def adjust_points(student_id: str, payload: PointAdjustment, classroom: Classroom = Depends(get_classroom)):
    try:
        change = classroom.apply_points(student_id, payload.delta, payload.reason)
    except NotFound:
        raise HTTPException(status_code=404, detail="Student not found")
    except InvalidDelta as e:
        raise HTTPException(status_code=422, detail=str(e))
    # leveled_up lets the client play its celebration
    return PointChangeOut(
        student=StudentOut.from_student(change.student),
        entry=change.entry,
        leveled_up=change.leveled_up,
    )


@router.post("/{student_id}/redeem", response_model=StudentOut)
def redeem(student_id: str, payload: RedeemRequest, classroom: Classroom = Depends(get_classroom)):
    reward = find_reward(payload.reward_id)
    if not reward:
        raise HTTPException(status_code=404, detail="Reward not found")
    try:
        student = classroom.redeem(student_id, reward)
    except NotFound:
        raise HTTPException(status_code=404, detail="Student not found")
    except InsufficientBalance as e:
        raise HTTPException(status_code=409, detail=str(e))
    return StudentOut.from_student(student)
