from typing import List, Optional
from fastapi import APIRouter, Depends
from app.context import PanelContext
from app.services.store import EntityKind
from database.schemas import FundsRequest, MessageResponse, TransactionResponse
from routes.deps import get_context

router = APIRouter(tags=["Economy"])

@router.post("/economy/add", response_model=MessageResponse)
async def add_funds(body: FundsRequest, context: PanelContext = Depends(get_context)):
    return {"message": await context.dispatcher.add_funds(body.player_id, body.amount)}

@router.post("/economy/remove", response_model=MessageResponse)
async def remove_funds(body: FundsRequest, context: PanelContext = Depends(get_context)):
    return {"message": await context.dispatcher.remove_funds(body.player_id, body.amount)}

@router.get("/api/economy/transactions", response_model=List[TransactionResponse])
def list_transactions(account_id: Optional[str] = None, context: PanelContext = Depends(get_context)):
    """Economy ledger, oldest first. Filter by player or user id."""
    transactions = context.store.list(EntityKind.TRANSACTION)
    if account_id:
        transactions = [t for t in transactions if t.account_id == account_id]
    return transactions
