import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from titanic_eda.config import REQUIRED_COLUMNS
from titanic_eda.data_loader import DataLoader

EXAMPLE_RECORDS = [
    {"Survived": 1, "Pclass": 1, "Sex": "female", "Age": 29, "SibSp": 0, "Parch": 0,
     "Fare": 100, "Embarked": "C", "Name": "Smith, Mrs. Jane"},
    {"Survived": 0, "Pclass": 3, "Sex": "male", "Age": 22, "SibSp": 1, "Parch": 0,
     "Fare": 7, "Embarked": "S", "Name": "Jones, Mr. Tom"},
    {"Survived": 1, "Pclass": 1, "Sex": "female", "Age": None, "SibSp": 0, "Parch": 0,
     "Fare": 90, "Embarked": "C", "Name": "Brown, Miss. Ann"},
    {"Survived": 0, "Pclass": 3, "Sex": "male", "Age": 30, "SibSp": 0, "Parch": 0,
     "Fare": 8, "Embarked": "S", "Name": "Lee, Mr. Sam"},
]

CSV_TEXT = (
    "PassengerId,Survived,Pclass,Name,Sex,Age,SibSp,Parch,Ticket,Fare,Cabin,Embarked\n"
    '1,0,3,"Braund, Mr. Owen Harris",male,22,1,0,A/5 21171,7.25,,S\n'
    '2,1,1,"Cumings, Mrs. John Bradley (Florence Briggs Thayer)",female,38,1,0,PC 17599,71.2833,C85,C\n'
    '3,1,3,"Heikkinen, Miss. Laina",female,26,0,0,STON/O2. 3101282,7.925,,S\n'
    '4,1,1,"Futrelle, Mrs. Jacques Heath (Lily May Peel)",female,35,1,0,113803,53.1,C123,S\n'
    '5,0,3,"Allen, Mr. William Henry",male,35,0,0,373450,8.05,,S\n'
    '6,0,3,"Moran, Mr. James",male,,0,0,330877,8.4583,,Q\n'
    '7,0,1,"McCarthy, Mr. Timothy J",male,54,0,0,17463,51.8625,E46,S\n'
    '8,0,3,"Palsson, Master. Gosta Leonard",male,2,3,1,349909,21.075,,S\n'
    '9,1,2,"Nasser, Mrs. Nicholas (Adele Achem)",female,14,1,0,237736,30.0708,,C\n'
    '62,1,1,"Icard, Miss. Amelie",female,38,0,0,113572,80,B28,\n'
    '31,0,1,"Uruchurtu, Don. Manuel E",male,40,0,0,PC 17601,27.7208,,C\n'
)


@pytest.fixture
def example_data():
    """The four-passenger example with one missing age."""
    return DataLoader.from_records(EXAMPLE_RECORDS)


@pytest.fixture
def empty_data():
    return pd.DataFrame(columns=list(REQUIRED_COLUMNS))


@pytest.fixture
def titanic_csv(tmp_path):
    path = tmp_path / "train.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path
