# -*- coding: utf-8 -*-


import loginradius as lr
from loginradius import HTTPClient, PostResponse, LoginRadiusLanguage


lr.set_config(
    apiKey="*****",
    apiSecret="*****",
    connectionTimeout=10000,
    # proxyAddress="http://proxy.example:8080",
    # proxyCredentials="user:password",
)

if __name__ == "__main__":
    config = lr.get_config()
    url = f"{config['apiDomain']}/identity/v2/manage/account/*****"

    request = lr.build_request(url, {"X-LoginRadius-ApiKey": config["apiKey"]})
    print(request)

    with HTTPClient() as client:
        response = client.put(
            url,
            headers={
                "X-LoginRadius-ApiKey": config["apiKey"],
                "X-LoginRadius-ApiSecret": config["apiSecret"],
            },
            json={"Languages": [LoginRadiusLanguage(id="en", name="English").to_dict()]},
        )
        print(PostResponse.from_dict(response.json()))
