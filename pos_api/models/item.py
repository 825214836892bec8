# pos_api/models/item.py
from sqlalchemy import Column, Float, Integer, JSON, String

from pos_api.db.base_class import Base


class Item(Base):
    # id é herdado da Base

    item_code = Column(String, nullable=True, index=True)  # chave natural, sem unicidade
    item_name = Column(String, nullable=True)
    item_group = Column(String, nullable=True, index=True)
    image = Column(String, nullable=True)
    valuation_rate = Column(Float, nullable=True)

    # Campos de enriquecimento (cardápio)
    name = Column(String, nullable=True)
    custom_addon_applicable = Column(Integer, nullable=True)
    custom_combo_applicable = Column(Integer, nullable=True)
    custom_total_calories = Column(Float, nullable=True)
    custom_total_protein = Column(Float, nullable=True)

    # Listas de formato variável, guardadas como JSON opaco
    ingredients = Column(JSON, nullable=False, default=list)
    addons = Column(JSON, nullable=False, default=list)
    combos = Column(JSON, nullable=False, default=list)
