from pydantic import BaseModel, ConfigDict


class ScholarAccount(BaseModel):
    # 主键为链上地址；文档存储中的其它列原样透传
    model_config = ConfigDict(extra="allow")

    address: str
